"""Operations over collections of Results, and exception capture."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

from rresult.errors import Propagate

from .result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
X = TypeVar("X", bound=BaseException)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[list[T], E]. Fail-fast on first Failure.

    Example:
        >>> sequence([success(1), success(2)])
        success([1, 2])
        >>> sequence([success(1), failure("fail"), success(3)])
        failure('fail')
    """
    values: list[T] = []
    for r in results:
        if isinstance(r, Failure):
            return r
        values.append(r._value)
    return Success(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results. Items after the first Failure are not visited."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if isinstance(r, Failure):
            return r
        values.append(r._value)
    return Success(values)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL failures (not fail-fast)."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if isinstance(r, Success) else errors).append(r._value)
    return Success(values) if not errors else Failure(errors)


def safe(*exceptions: type[X]) -> Callable[[Callable[P, T]], Callable[P, Result[T, X]]]:
    """Decorator: return Success(value), or Failure(exc) for the listed exception types.

    With no arguments, any Exception is captured. Unlisted exceptions propagate,
    and so does an early return from try_unwrap(), even under ``safe(BaseException)``.

    Example:
        >>> @safe(ValueError)
        ... def parse_int(s: str) -> int:
        ...     return int(s)
        >>> parse_int("42")
        success(42)
        >>> parse_int("x").is_failure()
        True
    """
    caught: tuple[type[BaseException], ...] = exceptions or (Exception,)

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, X]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, X]:
            try:
                return Success(func(*args, **kwargs))
            except Propagate:
                raise
            except caught as e:
                return Failure(e)  # type: ignore[arg-type]

        return wrapper

    return decorator
