"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from treeshop.core.config import get_config
from treeshop.core.logging_config import configure_logging
from treeshop.services.rate_table import get_rate_table

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """Fail-fast config and rate table checks."""
    config = get_config()
    rate_table = get_rate_table()

    if config.is_production and not config.RATE_TABLE_PATH:
        logger.warning(
            "startup.rates.defaults_in_production",
            extra={"event": "startup.rates.defaults_in_production"},
        )

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "rate_table_source": config.RATE_TABLE_PATH or "defaults",
            "packages": [package.id for package in rate_table.packages],
        },
    )


def bootstrap() -> None:
    """Initialize logging and validate runtime configuration."""
    configure_logging()
    validate_startup_config()
