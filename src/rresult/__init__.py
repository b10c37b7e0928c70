"""rresult - Success/failure values for Python.

A Result is either Success(value) or Failure(error). Recoverable errors are
returned, not raised, and composed with combinators:

    >>> from rresult import Result, failure, success
    >>>
    >>> def divide(a: float, b: float) -> Result[float, str]:
    ...     return failure("division by zero") if b == 0 else success(a / b)
    >>>
    >>> divide(10, 2).map(lambda x: x * 2).unwrap_or(0.0)
    10.0
    >>> divide(1, 0).map_failure(str.upper)
    failure('DIVISION BY ZERO')

Early return (in place of a ``?`` operator):

    >>> from rresult import propagate
    >>>
    >>> @propagate
    ... def ratio_sum(a: float, b: float, c: float) -> Result[float, str]:
    ...     return success(divide(a, b).try_unwrap() + divide(a, c).try_unwrap())
    >>>
    >>> ratio_sum(1, 2, 0)
    failure('division by zero')

Misuse raises: ``failure("boom").unwrap()`` raises UnwrapFailedError.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import (
    Failure,
    Result,
    Success,
    collect_results,
    display,
    early_return,
    failure,
    propagate,
    propagating,
    safe,
    sequence,
    success,
    traverse,
)

# Errors
from .errors import ErrorCode, EscapeContractError, Propagate, UnwrapFailedError

# Configuration
from .config import RResultSettings, clear_settings_cache, get_settings

# Logging
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Result
    "Result", "Success", "Failure", "success", "failure",
    # Early return
    "propagate", "propagating", "early_return",
    # Collections
    "sequence", "traverse", "collect_results", "safe",
    # Display
    "display",
    # Errors
    "ErrorCode", "UnwrapFailedError", "EscapeContractError", "Propagate",
    # Config
    "RResultSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "get_logger",
]
