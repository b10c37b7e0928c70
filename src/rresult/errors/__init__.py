"""Misuse exceptions for rresult.

- ErrorCode: codes carried by the exceptions below
- UnwrapFailedError: extraction on the wrong variant
- EscapeContractError: try_unwrap escape that returned normally
- Propagate: early-return carrier used with ``@propagate``
"""

from .errors import ErrorCode, EscapeContractError, Propagate, UnwrapFailedError

__all__ = ["ErrorCode", "EscapeContractError", "Propagate", "UnwrapFailedError"]
