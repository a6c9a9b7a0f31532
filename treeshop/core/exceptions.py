"""Custom exceptions for the TreeShop application."""


class TreeShopException(Exception):
    """Base exception for TreeShop application."""
    
    pass


class ValidationError(TreeShopException):
    """Raised when validation fails."""
    
    pass


class NotFoundError(TreeShopException):
    """Raised when a resource is not found."""
    
    pass


class UnknownPackageError(NotFoundError):
    """Raised when a forestry mulching package id is not in the rate table."""

    def __init__(self, package_id: str) -> None:
        super().__init__(f"Unknown forestry mulching package '{package_id}'")
        self.package_id = package_id


class ConfigurationError(TreeShopException):
    """Raised when configuration is invalid."""
    
    pass
