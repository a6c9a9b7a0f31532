from __future__ import annotations

import pytest

from treeshop.core.config import get_config
from treeshop.services.rate_table import get_rate_table


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    get_config.cache_clear()
    get_rate_table.cache_clear()
    yield
    get_config.cache_clear()
    get_rate_table.cache_clear()
