"""
Shared pytest fixtures:
- Fresh default config for every test (get_config is lru_cached)
- Clean logging context so bound fields don't leak between tests
- Capture of gasunit DEBUG records
"""
from __future__ import annotations

import logging

import pytest

from gasunit import logging as glog
from gasunit.config import get_config


@pytest.fixture(autouse=True)
def _fresh_gas_state():
    get_config.cache_clear()
    glog.clear_context()
    yield
    get_config.cache_clear()
    glog.clear_context()


@pytest.fixture
def gas_debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog preset to capture DEBUG records from the gasunit namespace."""
    caplog.set_level(logging.DEBUG, logger="gasunit")
    return caplog
