"""Result type for explicit success/failure values.

A Result is exactly one of two variants:
- Success: wraps the value of a computation that worked
- Failure: wraps a recoverable error value

Failures travel as ordinary return values. Exceptions are reserved for
misuse: extracting the wrong variant with expect/unwrap raises
UnwrapFailedError.

Examples:
    >>> success(2).map(lambda x: x * 2)
    success(4)
    >>> failure("bad").map(lambda x: x * 2)
    failure('bad')
    >>> failure(3).or_else(lambda x: success(x * x)).or_else(failure)
    success(9)

    Pattern matching:
    >>> match parse_port("8080"):
    ...     case Success(port):
    ...         print(f"listening on {port}")
    ...     case Failure(reason):
    ...         print(f"bad port: {reason}")

    Early return inside a ``@propagate`` function:
    >>> @propagate
    ... def total(a: str, b: str) -> Result[int, str]:
    ...     return success(parse_int(a).try_unwrap() + parse_int(b).try_unwrap())

Notes:
    - Closed type: Success and Failure are the only subclasses
    - Immutable: combinators return new Results, observers return self
    - map_or evaluates its default eagerly; use map_or_else when it is costly
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, Never, TypeVar, final

from rresult.errors import EscapeContractError, UnwrapFailedError
from rresult.observability import get_logger

from .display import display
from .propagate import early_return

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Failure type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped failure type

_VARIANTS = frozenset({"Success", "Failure"})
_UNWRAP_MSG = "called unwrap on a failure value"
_UNWRAP_FAILURE_MSG = "called unwrap_failure on a success value"

_log = get_logger("rresult.result")


class Result(ABC, Generic[T, E]):
    """Sealed union of Success[T] and Failure[E].

    Construct with success()/failure() (or the variant classes). Subclassing
    outside this module raises TypeError.

    Examples:
        >>> r: Result[int, str] = success(9)
        >>> r.unwrap_or(2)
        9
        >>> failure("e").unwrap_or(2)
        2
    """

    __slots__ = ("_value",)

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError(f"Result is sealed; {cls.__qualname__} cannot extend it")

    def __init__(self, value: T | E) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Result[T, E]], tuple[T | E]]:
        return (type(self), (self._value,))

    # ─── Inspection ────────────────────────────────────────────────────

    @abstractmethod
    def is_success(self) -> bool:
        """True if Success."""

    @abstractmethod
    def is_failure(self) -> bool:
        """True if Failure."""

    @abstractmethod
    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if Success and predicate(value) holds. predicate is not called on Failure."""

    @abstractmethod
    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        """True if Failure and predicate(error) holds. predicate is not called on Success."""

    @abstractmethod
    def success_value(self) -> T | None:
        """Success payload, or None on Failure."""

    @abstractmethod
    def failure_value(self) -> E | None:
        """Failure payload, or None on Success."""

    # ─── Transformation ────────────────────────────────────────────────

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to a Success payload; a Failure passes through unchanged.

        Signature: Result[T,E] → (T→U) → Result[U,E]
        """

    @abstractmethod
    def map_failure(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to a Failure payload; a Success passes through unchanged."""

    @abstractmethod
    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) on Success, default on Failure.

        The default is evaluated by the caller before the call, whichever
        variant this is. Use map_or_else to compute it only on Failure.
        """

    @abstractmethod
    def map_or_else(self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """f(value) on Success, default(error) on Failure."""

    @abstractmethod
    def bimap(self, on_success: Callable[[T], U], on_failure: Callable[[E], F]) -> Result[U, F]:
        """Apply on_success or on_failure to the payload, keeping the variant."""

    # ─── Observers ─────────────────────────────────────────────────────

    @abstractmethod
    def on_success(self, callback: Callable[[T], object]) -> Result[T, E]:
        """Call callback(value) if Success. Returns self for chaining.

        Example:
            >>> fetch(url).on_success(cache.put).on_failure(log_error).unwrap_or(b"")
        """

    @abstractmethod
    def on_failure(self, callback: Callable[[E], object]) -> Result[T, E]:
        """Call callback(error) if Failure. Returns self for chaining."""

    # ─── Extraction ────────────────────────────────────────────────────

    @abstractmethod
    def expect(self, message: str) -> T:
        """Success payload, or raise UnwrapFailedError(message, error).

        Raises:
            UnwrapFailedError: If Failure. str(exc) is "<message>: <error repr>"
        """

    @abstractmethod
    def unwrap(self) -> T:
        """Success payload, or raise UnwrapFailedError.

        Prefer pattern matching or unwrap_or/unwrap_or_else where a Failure is
        possible.
        """

    @abstractmethod
    def expect_failure(self, message: str) -> E:
        """Failure payload, or raise UnwrapFailedError(message, value)."""

    @abstractmethod
    def unwrap_failure(self) -> E:
        """Failure payload, or raise UnwrapFailedError."""

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Success payload, or default."""

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Success payload, or f(error) computed only on Failure."""

    @abstractmethod
    def try_unwrap(self, escape: Callable[[Failure[E]], Never] | None = None) -> T:
        """Success payload, or hand this Failure to escape, which must not return.

        Without escape, a Propagate exception is raised; a function decorated
        with ``@propagate`` turns it into an early ``return`` of this Failure.
        A custom escape must raise.

        Raises:
            EscapeContractError: If escape returns normally
        """

    # ─── Combination ───────────────────────────────────────────────────

    @abstractmethod
    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """other if Success, else self. Keeps the first Failure."""

    @abstractmethod
    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """f(value) if Success, else self. f runs only on Success.

        Example:
            >>> success("42").and_then(parse_int).and_then(validate_positive)
            success(42)
        """

    @abstractmethod
    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """self if Success, else other. First Success wins."""

    @abstractmethod
    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """self if Success, else f(error). f runs only on Failure."""

    @abstractmethod
    def flatten(self: Result[Result[U, E], E]) -> Result[U, E]:
        """Result[Result[U,E],E] → Result[U,E]"""

    @abstractmethod
    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Call exactly one handler with the payload and return its value."""

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__.lower()}({display(self._value)})"

    __str__ = __repr__

    @abstractmethod
    def __bool__(self) -> bool: ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yields the value if Success, nothing if Failure."""


@final
class Success(Result[T, Never]):
    """Holds the value of a successful computation."""

    __slots__ = ()
    __match_args__ = ("_value",)

    def __init__(self, value: T) -> None:
        super().__init__(value)

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self._value)

    def is_failure_and(self, predicate: Callable[[Never], bool]) -> bool:
        return False

    def success_value(self) -> T:
        return self._value

    def failure_value(self) -> None:
        return None

    def map(self, f: Callable[[T], U]) -> Success[U]:
        return Success(f(self._value))

    def map_failure(self, f: Callable[[Never], F]) -> Success[T]:
        return Success(self._value)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self._value)

    def map_or_else(self, default: Callable[[Never], U], f: Callable[[T], U]) -> U:
        return f(self._value)

    def bimap(self, on_success: Callable[[T], U], on_failure: Callable[[Never], F]) -> Success[U]:
        return Success(on_success(self._value))

    def on_success(self, callback: Callable[[T], object]) -> Success[T]:
        callback(self._value)
        return self

    def on_failure(self, callback: Callable[[Never], object]) -> Success[T]:
        return self

    def expect(self, message: str) -> T:
        return self._value

    def unwrap(self) -> T:
        return self._value

    def expect_failure(self, message: str) -> Never:
        raise _unwrap_failed(message, self._value)

    def unwrap_failure(self) -> Never:
        raise _unwrap_failed(_UNWRAP_FAILURE_MSG, self._value)

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_or_else(self, f: Callable[[Never], T]) -> T:
        return self._value

    def try_unwrap(self, escape: Callable[[Failure[Never]], Never] | None = None) -> T:
        return self._value

    def and_(self, other: Result[U, F]) -> Result[U, F]:
        return other

    def and_then(self, f: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return f(self._value)

    def or_(self, other: Result[T, F]) -> Success[T]:
        return self

    def or_else(self, f: Callable[[Never], Result[T, F]]) -> Success[T]:
        return self

    def flatten(self: Success[Result[U, F]]) -> Result[U, F]:
        return self._value

    def match(self, *, success: Callable[[T], U], failure: Callable[[Never], U]) -> U:
        return success(self._value)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield self._value


@final
class Failure(Result[Never, E]):
    """Holds a recoverable error value."""

    __slots__ = ()
    __match_args__ = ("_value",)

    def __init__(self, value: E) -> None:
        super().__init__(value)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def is_success_and(self, predicate: Callable[[Never], bool]) -> bool:
        return False

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        return predicate(self._value)

    def success_value(self) -> None:
        return None

    def failure_value(self) -> E:
        return self._value

    def map(self, f: Callable[[Never], U]) -> Failure[E]:
        return Failure(self._value)

    def map_failure(self, f: Callable[[E], F]) -> Failure[F]:
        return Failure(f(self._value))

    def map_or(self, default: U, f: Callable[[Never], U]) -> U:
        return default

    def map_or_else(self, default: Callable[[E], U], f: Callable[[Never], U]) -> U:
        return default(self._value)

    def bimap(self, on_success: Callable[[Never], U], on_failure: Callable[[E], F]) -> Failure[F]:
        return Failure(on_failure(self._value))

    def on_success(self, callback: Callable[[Never], object]) -> Failure[E]:
        return self

    def on_failure(self, callback: Callable[[E], object]) -> Failure[E]:
        callback(self._value)
        return self

    def expect(self, message: str) -> Never:
        raise _unwrap_failed(message, self._value)

    def unwrap(self) -> Never:
        raise _unwrap_failed(_UNWRAP_MSG, self._value)

    def expect_failure(self, message: str) -> E:
        return self._value

    def unwrap_failure(self) -> E:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self._value)

    def try_unwrap(self, escape: Callable[[Failure[E]], Never] | None = None) -> Never:
        (early_return if escape is None else escape)(self)
        raise EscapeContractError(self)

    def and_(self, other: Result[U, E]) -> Failure[E]:
        return self

    def and_then(self, f: Callable[[Never], Result[U, E]]) -> Failure[E]:
        return self

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return f(self._value)

    def flatten(self) -> Failure[E]:
        return self

    def match(self, *, success: Callable[[Never], U], failure: Callable[[E], U]) -> U:
        return failure(self._value)

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Never]:
        return iter(())


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Result[T, E]:
    """Construct Success variant."""
    return Success(value)


def failure(error: E) -> Result[T, E]:
    """Construct Failure variant."""
    return Failure(error)


def _unwrap_failed(message: str, value: object) -> UnwrapFailedError:
    _log.debug("unwrap failed", message=message, payload_type=type(value).__qualname__)
    return UnwrapFailedError(message, value)
