from __future__ import annotations

import logging

import treeshop.core.startup as startup_module
from treeshop.services.rate_table import default_rate_table


class _Cfg:
    def __init__(self, production: bool, rate_table_path: str | None = None) -> None:
        self.ENV = "production" if production else "development"
        self.RATE_TABLE_PATH = rate_table_path

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def test_startup_warns_when_production_uses_default_rates(monkeypatch, caplog):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg(production=True))
    monkeypatch.setattr(startup_module, "get_rate_table", default_rate_table)

    with caplog.at_level(logging.INFO, logger=startup_module.__name__):
        startup_module.validate_startup_config()

    messages = [record.getMessage() for record in caplog.records]
    assert "startup.rates.defaults_in_production" in messages
    assert "startup.config.validated" in messages


def test_startup_quiet_in_development(monkeypatch, caplog):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg(production=False))
    monkeypatch.setattr(startup_module, "get_rate_table", default_rate_table)

    with caplog.at_level(logging.INFO, logger=startup_module.__name__):
        startup_module.validate_startup_config()

    assert all(record.levelno < logging.WARNING for record in caplog.records)
