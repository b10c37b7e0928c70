"""Exceptions raised when a Result is misused.

Recoverable errors travel as Failure payloads and are never raised. The
exceptions here signal programmer error: extracting the wrong variant, or an
escape callback that returned when it must not.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rresult.core.result import Result


class ErrorCode(StrEnum):
    """Codes attached to misuse exceptions."""
    UNWRAP_FAILED = "UNWRAP_FAILED"
    ESCAPE_RETURNED = "ESCAPE_RETURNED"


class UnwrapFailedError(RuntimeError):
    """Raised by expect/unwrap (and their failure-side twins) on the wrong variant.

    The rendered message is ``"<message>: <payload repr>"`` so the offending
    payload shows up at the call site.

    Example:
        >>> failure("boom").expect("loading config")
        Traceback (most recent call last):
        ...
        rresult.errors.errors.UnwrapFailedError: loading config: 'boom'
    """

    __slots__ = ("message", "value")

    code = ErrorCode.UNWRAP_FAILED

    def __init__(self, message: str, value: object) -> None:
        self.message = message
        self.value = value
        from rresult.core.display import display
        super().__init__(f"{message}: {display(value)}")


class EscapeContractError(TypeError):
    """Raised when a try_unwrap escape callback returns normally."""

    __slots__ = ("result",)

    code = ErrorCode.ESCAPE_RETURNED

    def __init__(self, result: Result[object, object]) -> None:
        self.result = result
        super().__init__(f"try_unwrap escape returned instead of exiting: {result!r}")


class Propagate(BaseException):
    """Carries a Failure out of a function decorated with ``@propagate``.

    Control flow only. The default try_unwrap escape raises it and the
    decorator (or a ``propagating()`` block) turns it back into a value.
    Derives from BaseException, like GeneratorExit, so ``except Exception``
    handlers between try_unwrap() and the decorator do not intercept it.
    """

    __slots__ = ("result",)

    def __init__(self, result: Result[object, object]) -> None:
        self.result = result
        super().__init__(result)
