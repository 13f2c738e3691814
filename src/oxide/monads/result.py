"""Result type: success (Ok) or failure (Err) for fallible computations.

Implements a closed two-variant value with short-circuiting combinators:
- Chain: chain / ``>>`` (continue with the Ok value, skip on Err)
- Functor: map, map_err, bimap
- Monad: and_then, or_else, flatten
- Extraction: unwrap, unwrap_or, unwrap_or_else, unwrap_err, expect
- Side effects: tap_ok, tap_err
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar, cast

from ..errors import ErrorCode, InvalidArgument, UnwrapError, render_value

# Type variables for generic Result
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type

_OK = True
_ERR = False


def _raiseable(value: object) -> bool:
    """Exception instances and exception classes can be passed to ``raise``."""
    return isinstance(value, BaseException) or (isinstance(value, type) and issubclass(value, BaseException))


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    A Result carries exactly one payload and a tag; build one with ``Ok()`` or
    ``Err()``. Every combinator returns a new Result (or this one unchanged),
    so instances are never mutated after construction.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(84)
        >>> Err("failed").map(lambda x: x * 2)
        Err('failed')

        Chaining fallible steps:
        >>> def double(x: int) -> Result[int, str]:
        ...     return Ok(x * 2)
        >>> def validate_positive(x: int) -> Result[int, str]:
        ...     return Ok(x) if x > 0 else Err("non_positive")
        >>> Ok(5) >> double >> validate_positive >> double
        Ok(20)
        >>> Ok(-5) >> double >> validate_positive >> double
        Err('non_positive')

    Notes:
        - Uses __slots__; payload and tag are set once in __init__
        - Supports ``match`` statements: ``case Result(value) if value...``
          or the ``ok``/``err`` predicates
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | E = value
        self._is_ok: bool = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Chain
    # ─────────────────────────────────────────────────────────────────

    def chain(self, f: Callable[[T], Any]) -> Any:
        """Continue with ``f(value)`` if Ok, short-circuit if Err.

        ``f``'s return value is passed back untouched: intermediate steps
        return Results, the last step of a chain may return anything.
        The Err instance itself is returned on short-circuit and ``f`` is
        never called.
        """
        if not callable(f):
            raise InvalidArgument.create(
                "chain", "chain() expects a callable continuation", code=ErrorCode.NOT_CALLABLE, received=f
            )
        return f(cast(T, self._value)) if self._is_ok else self

    def __rshift__(self, f: Callable[[T], Any]) -> Any:
        """``result >> f`` is ``result.chain(f)``. Left-associative."""
        return self.chain(f)

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            BaseException: the Err reason itself, when it is an exception
                instance or class
            UnwrapError: for any other Err reason, with the reason rendered
                into the message
        """
        if self._is_ok:
            return cast(T, self._value)
        if _raiseable(self._value):
            raise self._value  # type: ignore[misc]
        raise UnwrapError(f"Unwrapped an error: {render_value(self._value)}", operation="unwrap")

    def unwrap_err(self) -> E:
        """Extract Err reason.

        Raises:
            UnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError.create(
            "unwrap_err", "called unwrap_err on an Ok value", code=ErrorCode.UNWRAP_ON_OK, received=self._value
        )

    def unwrap_or(self, default: U) -> T | U:
        """Extract Ok value or return default (evaluated eagerly by the caller)."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, thunk: Callable[[], U]) -> T | U:
        """Extract Ok value or call the zero-argument ``thunk`` (only on Err)."""
        return cast(T, self._value) if self._is_ok else thunk()

    def expect(self, msg: str) -> T:
        """Extract Ok value with a custom message on failure.

        Exception reasons are re-raised as-is, like ``unwrap``.
        """
        if self._is_ok:
            return cast(T, self._value)
        if _raiseable(self._value):
            raise self._value  # type: ignore[misc]
        raise UnwrapError(f"{msg}: {render_value(self._value)}", operation="expect")

    def expect_err(self, msg: str) -> E:
        """Extract Err reason with a custom message if Ok."""
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError.create("expect_err", msg, code=ErrorCode.UNWRAP_ON_OK, received=self._value)

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map function over Ok value, preserve Err unchanged.

        Type signature: Result[T, E] -> (T -> U) -> Result[U, E]
        """
        if self._is_ok:
            return Result(f(cast(T, self._value)), _OK)
        return cast(Result[U, E], self)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map function over Err reason, preserve Ok unchanged.

        Type signature: Result[T, E] -> (E -> F) -> Result[T, F]
        """
        if not self._is_ok:
            return Result(f(cast(E, self._value)), _ERR)
        return cast(Result[T, F], self)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Return ``f(value)`` for Ok, ``default`` for Err. Both unwrapped."""
        return f(cast(T, self._value)) if self._is_ok else default

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err."""
        if self._is_ok:
            return Result(ok_fn(cast(T, self._value)), _OK)
        return Result(err_fn(cast(E, self._value)), _ERR)

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: return ``f(value)`` as-is if Ok, else this Err.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     try:
            ...         return Ok(int(s))
            ...     except ValueError:
            ...         return Err(f"invalid int: {s}")
            >>> Ok("42").and_then(parse_int)
            Ok(42)
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(Result[U, E], self)

    def or_else(self, f: Callable[[E], Any]) -> Any:
        """Recover from Err: return ``f(reason)`` as-is. Ok passes through.

        ``f`` may return a Result or a plain fallback value; nothing is re-wrapped.
        """
        if not self._is_ok:
            return f(cast(E, self._value))
        return self

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Result[Result[T, E], E] -> Result[T, E]"""
        if self._is_ok:
            return cast(Result[T, E], self._value)
        return cast(Result[T, E], self)

    # ─────────────────────────────────────────────────────────────────
    # Side Effects
    # ─────────────────────────────────────────────────────────────────

    def tap_ok(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with Ok value for side effects, discard its return, return self."""
        if self._is_ok:
            f(cast(T, self._value))
        return self

    def tap_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with Err reason for side effects, discard its return, return self."""
        if not self._is_ok:
            f(cast(E, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching & Conversion
    # ─────────────────────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    def to_tagged(self) -> tuple[str, T | E]:
        """Convert to the tagged pair ``("ok", value)`` / ``("error", reason)``."""
        return ("ok" if self._is_ok else "error", self._value)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Ok."""
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        """Structural equality: same variant and equal payloads."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Ok value once; nothing for Err."""
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, Any]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[Any, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


def ensure_result(value: object, operation: str) -> Result[Any, Any]:
    """Return ``value`` if it is a Result, else raise InvalidArgument."""
    if isinstance(value, Result):
        return value
    raise InvalidArgument.create(operation, f"{operation}() expects a Result", received=value)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert a sequence of Results into a Result of a list.

    Returns the first Err in order, without looking at anything after it.
    An empty input gives ``Ok([])``.

    Example:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> collect([Ok(1), Err("a"), Ok(3), Err("b")])
        Err('a')
    """
    values: list[T] = []
    for result in results:
        result = ensure_result(result, "collect")
        if not result._is_ok:
            return cast(Result[list[T], E], result)
        values.append(cast(T, result._value))
    return Result(values, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map a Result-returning function over items and collect.

    Stops calling ``f`` after the first Err.

    Example:
        >>> traverse(["1", "2"], lambda s: Ok(int(s)))
        Ok([1, 2])
    """
    return collect(f(item) for item in items)


def partition(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Like collect, but accumulates every Err reason instead of stopping.

    Example:
        >>> partition([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        result = ensure_result(result, "partition")
        if result._is_ok:
            values.append(cast(T, result._value))
        else:
            errors.append(cast(E, result._value))
    return Result(values, _OK) if not errors else Result(errors, _ERR)
