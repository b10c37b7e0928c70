"""Environment-based configuration using pydantic-settings.

Example:
    >>> from rresult.config import get_settings
    >>> settings = get_settings()
    >>> settings.display.placeholder
    '<uninspectable value>'
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # RRESULT_DISPLAY_PLACEHOLDER="<opaque>"
    # RRESULT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLACEHOLDER = "<uninspectable value>"


class DisplaySettings(BaseSettings):
    """How payloads are rendered in reprs and error messages."""

    model_config = SettingsConfigDict(
        env_prefix="RRESULT_DISPLAY_",
        extra="ignore",
    )

    placeholder: str = Field(
        default=DEFAULT_PLACEHOLDER,
        min_length=1,
        description="Shown in place of a payload whose repr() raises",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RRESULT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class RResultSettings(BaseSettings):
    """Root settings for rresult.

    Example environment variables:
        RRESULT_DEBUG=true
        RRESULT_DISPLAY_PLACEHOLDER="<hidden>"
        RRESULT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging regardless of RRESULT_LOG_LEVEL")

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> RResultSettings:
    """Get the global settings instance (cached)."""
    return RResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
