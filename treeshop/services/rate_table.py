"""Business rate table consumed by the pricing service.

The table is read-only configuration. ``default_rate_table()`` carries the
standard Tree Shop packages and terms; ``load_rate_table()`` overlays a JSON
file on top of those defaults. Every section is a frozen pydantic model, so a
file with unknown keys, wrong types or out-of-range rates is rejected at load.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from treeshop.core.config import get_config
from treeshop.core.exceptions import ConfigurationError, UnknownPackageError

logger = logging.getLogger(__name__)

# Strict: "4500" or null in a rate file is an error, not a coerced number.
_SECTION_CONFIG = ConfigDict(frozen=True, extra="forbid", strict=True)


class ForestryPackage(BaseModel):
    model_config = _SECTION_CONFIG

    id: str = Field(min_length=1)
    name: str
    description: str
    base_price: float = Field(ge=0)
    price_per_acre: float = Field(gt=0)
    max_dbh: int = Field(gt=0)
    min_acres: float = Field(default=0.5, ge=0)


class LandClearingRates(BaseModel):
    model_config = _SECTION_CONFIG

    equipment_rate: float = Field(default=4500, gt=0)
    debris_haul_rate: float = Field(default=23, ge=0)
    average_debris_per_acre: float = Field(default=85, ge=0)
    days_per_quarter_acre: float = Field(default=2, gt=0)


class PaymentTerms(BaseModel):
    model_config = _SECTION_CONFIG

    deposit_percent: float = Field(default=0.25, ge=0, le=1)
    minimum_deposit: float = Field(default=250, ge=0)
    late_fee_rate: float = Field(default=0.03, ge=0)
    validity_days: int = Field(default=60, ge=0)


class ScopeTemplates(BaseModel):
    model_config = _SECTION_CONFIG

    forestry_mulching: str = (
        "Forestry Mulch the highlighted area ([ACRES] Acre) at the [PACKAGE] "
        "to open up the land for access per the attached site plan."
    )
    land_clearing: str = (
        "Remove trees that are declining, interfering with utilities, or marked. "
        "Day Rate $[RATE] x[DAYS]. All debris [DEBRIS_HANDLING]."
    )


DEFAULT_PACKAGES = (
    ForestryPackage(
        id="fm-6dbh",
        name='Forestry Mulching- 6"DBH Package',
        description='Grind vegetation up to 6" diameter at breast height',
        base_price=1800,
        price_per_acre=1800,
        max_dbh=6,
    ),
    ForestryPackage(
        id="fm-8dbh",
        name='Forestry Mulching- 8"DBH Package',
        description='Grind vegetation up to 8" diameter at breast height',
        base_price=2200,
        price_per_acre=2200,
        max_dbh=8,
    ),
    ForestryPackage(
        id="fm-12dbh",
        name='Forestry Mulching- 12"DBH Package',
        description='Grind vegetation up to 12" diameter at breast height',
        base_price=3000,
        price_per_acre=3000,
        max_dbh=12,
    ),
)


class RateTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    packages: tuple[ForestryPackage, ...] = DEFAULT_PACKAGES
    land_clearing: LandClearingRates = Field(default_factory=LandClearingRates)
    payment: PaymentTerms = Field(default_factory=PaymentTerms)
    templates: ScopeTemplates = Field(default_factory=ScopeTemplates)

    def get_package(self, package_id: str) -> ForestryPackage:
        for package in self.packages:
            if package.id == package_id:
                return package
        raise UnknownPackageError(package_id)


def default_rate_table() -> RateTable:
    return RateTable()


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'value'}: {error['msg']}" for error in exc.errors()
    )


def _parse_packages(raw: Any) -> tuple[ForestryPackage, ...]:
    if not isinstance(raw, list) or not raw:
        raise ConfigurationError("Rate table 'packages' must be a non-empty list.")
    packages = []
    for index, entry in enumerate(raw):
        try:
            packages.append(ForestryPackage.model_validate(entry))
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid forestry package at packages[{index}]: {_describe(exc)}") from exc
    ids = [package.id for package in packages]
    if len(ids) != len(set(ids)):
        raise ConfigurationError(f"Duplicate forestry package ids: {ids}")
    return tuple(packages)


def _parse_section(current: BaseModel, raw: Any, section: str) -> BaseModel:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Rate table section '{section}' must be an object.")
    try:
        return type(current).model_validate({**current.model_dump(), **raw})
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid rate table section '{section}': {_describe(exc)}") from exc


def parse_rate_table(data: dict[str, Any]) -> RateTable:
    """Build a rate table from a mapping, filling gaps from the defaults."""
    if not isinstance(data, dict):
        raise ConfigurationError("Rate table must be a JSON object.")
    unknown = set(data) - set(RateTable.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown rate table sections: {sorted(unknown)}")

    defaults = default_rate_table()
    updates: dict[str, Any] = {}
    if "packages" in data:
        updates["packages"] = _parse_packages(data["packages"])
    for section in ("land_clearing", "payment", "templates"):
        if section in data:
            updates[section] = _parse_section(getattr(defaults, section), data[section], section)
    return defaults.model_copy(update=updates)


def load_rate_table(path: str | Path) -> RateTable:
    """Load a rate table from a JSON file."""
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Rate table file '{file_path}' was not found")
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Rate table file '{file_path}' is not valid JSON: {exc}") from exc

    table = parse_rate_table(data)
    logger.info(
        "rates.table.loaded",
        extra={"event": "rates.table.loaded", "path": str(file_path), "packages": len(table.packages)},
    )
    return table


@lru_cache(maxsize=1)
def get_rate_table() -> RateTable:
    """Rate table for the running application, from RATE_TABLE_PATH or defaults."""
    config = get_config()
    if config.RATE_TABLE_PATH:
        return load_rate_table(config.RATE_TABLE_PATH)
    return default_rate_table()
