"""Configuration management using pydantic-settings."""

from .settings import (
    DEFAULT_PLACEHOLDER,
    DisplaySettings,
    LoggingSettings,
    RResultSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "DisplaySettings",
    "LoggingSettings",
    "RResultSettings",
    "clear_settings_cache",
    "get_settings",
]
