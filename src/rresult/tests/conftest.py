"""Shared fixtures for rresult tests."""

import pytest

from rresult.config import clear_settings_cache
from rresult.observability import reset_logging


@pytest.fixture(autouse=True)
def clean_globals() -> object:
    """Reset cached settings and logging configuration around each test."""
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
