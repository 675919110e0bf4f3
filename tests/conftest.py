"""Shared test fixtures and sample scenarios."""

from __future__ import annotations

import logging

import pytest

import kinecalc.call_logging as call_logging
from kinecalc.config import get_settings

REFERENCE_CONFIG = {
    "velocity": 10000,
    "acceleration": 3,
    "time": 3600,
    "initialDistance": 0,
    "remainingFuel": 5000,
    "fuelBurnRate": 0.5,
}


def _clear_logger() -> None:
    named_logger = logging.getLogger(call_logging.LOGGER_NAME)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    call_logging._logger = None


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch):
    """Start every test with no log file and fresh settings."""
    monkeypatch.delenv("KINECALC_LOG_DIR", raising=False)
    monkeypatch.delenv("KINECALC_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    _clear_logger()

    yield

    # Close file handlers to release file locks (important on Windows)
    _clear_logger()
    get_settings.cache_clear()


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Route the calculation log into tmp_path and return the directory."""
    monkeypatch.setenv("KINECALC_LOG_DIR", str(tmp_path))
    get_settings.cache_clear()
    return tmp_path


@pytest.fixture
def reference_config() -> dict:
    return dict(REFERENCE_CONFIG)
