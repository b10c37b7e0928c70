"""Payload rendering for reprs and error messages."""

from __future__ import annotations

from pydantic import ValidationError

from rresult.config import DEFAULT_PLACEHOLDER, get_settings
from rresult.observability import get_logger

_log = get_logger("rresult.display")


def display(value: object) -> str:
    """repr() of value, or the configured placeholder if repr() raises.

    Example:
        >>> display("boom")
        "'boom'"
        >>> class Opaque:
        ...     def __repr__(self) -> str:
        ...         raise RuntimeError("no repr")
        >>> display(Opaque())
        '<uninspectable value>'
    """
    try:
        return repr(value)
    except Exception as e:
        _log.debug("payload repr failed", payload_type=type(value).__qualname__, error=str(e))
        return _placeholder()


def _placeholder() -> str:
    """Configured placeholder, or the default when the environment holds invalid settings."""
    try:
        return get_settings().display.placeholder
    except ValidationError:
        return DEFAULT_PLACEHOLDER
