"""Tests for environment-based settings."""

import pytest
from pydantic import ValidationError

from rresult.config import RResultSettings, clear_settings_cache, get_settings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.display.placeholder == "<uninspectable value>"
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RRESULT_DEBUG", "true")
    monkeypatch.setenv("RRESULT_LOG_LEVEL", "debug")
    monkeypatch.setenv("RRESULT_LOG_FORMAT", "JSON")
    monkeypatch.setenv("RRESULT_DISPLAY_PLACEHOLDER", "<hidden>")

    settings = RResultSettings()

    assert settings.debug is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.display.placeholder == "<hidden>"


def test_clear_settings_cache_reloads(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("RRESULT_LOG_LEVEL", "WARNING")

    assert get_settings() is first
    clear_settings_cache()
    assert get_settings().logging.level == "WARNING"


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RRESULT_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        RResultSettings()
