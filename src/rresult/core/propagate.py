"""Early return for functions that produce Results.

Python has no ``?`` operator, so ``try_unwrap()`` raises a Propagate carrying
the Failure and ``@propagate`` converts it back into the function's return
value:

    >>> @propagate
    ... def load(path: str) -> Result[Config, str]:
    ...     text = read_file(path).try_unwrap()      # returns Failure early
    ...     data = parse_toml(text).try_unwrap()
    ...     return success(Config(**data))

The Propagate is caught by the nearest enclosing ``@propagate`` function (or
``propagating()`` block) on the call stack. Undecorated helpers in between
are unwound like any other exception.
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import TYPE_CHECKING, Callable, Never, ParamSpec, TypeVar

from rresult.errors import Propagate
from rresult.observability import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from .result import Failure, Result

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

_log = get_logger("rresult.propagate")


def early_return(result: Failure[E]) -> Never:
    """Default try_unwrap escape. Raises Propagate(result)."""
    raise Propagate(result)


def propagate(func: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """Return the Failure carried by a Propagate raised inside func.

    Works on both sync and async functions.
    """
    where = getattr(func, "__qualname__", repr(func))

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            try:
                return await func(*args, **kwargs)  # type: ignore[misc]
            except Propagate as p:
                return _returned_early(where, p)  # type: ignore[return-value]

        return async_wrapper  # type: ignore[return-value]

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return func(*args, **kwargs)
        except Propagate as p:
            return _returned_early(where, p)  # type: ignore[return-value]

    return wrapper


class propagating:
    """Context manager form of ``@propagate`` for a block of statements.

    A Propagate raised inside the block ends it; the carried Failure is kept
    on ``.result``. ``.result`` stays None when the block runs to completion.

    Example:
        >>> with propagating() as block:
        ...     port = parse_port(raw).try_unwrap()
        ...     host = resolve(name).try_unwrap()
        >>> if block.result is not None:
        ...     return block.result
    """

    __slots__ = ("result",)

    def __init__(self) -> None:
        self.result: Failure[object] | None = None

    def __enter__(self) -> propagating:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> bool:
        if not isinstance(exc_val, Propagate):
            return False
        self.result = _returned_early("propagating", exc_val)  # type: ignore[assignment]
        return True


def _returned_early(where: str, p: Propagate) -> Result[object, object]:
    if _log.is_enabled_for(logging.DEBUG):
        _log.debug("early return", function=where, result=repr(p.result))
    return p.result
