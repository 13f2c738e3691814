"""Free-function forms of the Result combinators.

Each function takes the Result as its first argument, which reads well in
``functools.partial`` pipelines and when results come from untyped code.
Unlike the methods, these check their first argument and raise
``InvalidArgument`` for anything that is not a Result.

Example:
    >>> from oxide import functions as R
    >>> R.map(R.ok(3), lambda x: x + 1)
    Ok(4)
    >>> R.unwrap_or(R.error("nan"), 0)
    0
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ..errors import NotAResult
from .result import Err, Ok, Result, collect, ensure_result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

__all__ = [
    "ok", "error", "is_ok", "is_error", "is_result", "assert_result",
    "chain", "map", "map_err", "map_or", "and_then", "or_else", "tap_ok", "tap_err",
    "unwrap", "unwrap_or", "unwrap_or_else", "unwrap_err", "expect",
    "err_if_nil", "collect",
]


# ─── Construction & Predicates ─────────────────────────────────────────────


def ok(value: T) -> Result[T, Any]:
    """Wrap a value in an Ok result."""
    return Ok(value)


def error(reason: E) -> Result[Any, E]:
    """Wrap a reason in an Err result."""
    return Err(reason)


def is_ok(result: Result[Any, Any]) -> bool:
    return ensure_result(result, "is_ok").is_ok()


def is_error(result: Result[Any, Any]) -> bool:
    return ensure_result(result, "is_error").is_err()


def is_result(value: object) -> bool:
    """True for a Result, False for anything else. Never raises."""
    return isinstance(value, Result)


def assert_result(value: object) -> Result[Any, Any]:
    """Return ``value`` unchanged if it is a Result, else raise NotAResult."""
    if isinstance(value, Result):
        return value
    raise NotAResult("Not a result", operation="assert_result")


# ─── Chain & Transformations ───────────────────────────────────────────────


def chain(left: Result[T, E], right: Callable[[T], Any]) -> Any:
    """Short-circuiting pipe: ``right(value)`` for Ok, ``left`` for Err."""
    return ensure_result(left, "chain").chain(right)


def map(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    return ensure_result(result, "map").map(f)


def map_err(result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    return ensure_result(result, "map_err").map_err(f)


def map_or(result: Result[T, E], default: U, f: Callable[[T], U]) -> U:
    return ensure_result(result, "map_or").map_or(default, f)


def and_then(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    return ensure_result(result, "and_then").and_then(f)


def or_else(result: Result[T, E], f: Callable[[E], Any]) -> Any:
    return ensure_result(result, "or_else").or_else(f)


def tap_ok(result: Result[T, E], f: Callable[[T], object]) -> Result[T, E]:
    return ensure_result(result, "tap_ok").tap_ok(f)


def tap_err(result: Result[T, E], f: Callable[[E], object]) -> Result[T, E]:
    return ensure_result(result, "tap_err").tap_err(f)


# ─── Extraction ────────────────────────────────────────────────────────────


def unwrap(result: Result[T, Any]) -> T:
    """Ok value, or raise: exception reasons as-is, anything else as UnwrapError."""
    return ensure_result(result, "unwrap").unwrap()


def unwrap_or(result: Result[T, Any], default: U) -> T | U:
    return ensure_result(result, "unwrap_or").unwrap_or(default)


def unwrap_or_else(result: Result[T, Any], thunk: Callable[[], U]) -> T | U:
    return ensure_result(result, "unwrap_or_else").unwrap_or_else(thunk)


def unwrap_err(result: Result[Any, E]) -> E:
    return ensure_result(result, "unwrap_err").unwrap_err()


def expect(result: Result[T, Any], msg: str) -> T:
    return ensure_result(result, "expect").expect(msg)


# ─── Adapters ──────────────────────────────────────────────────────────────


def err_if_nil(value: object, reason: E) -> Result[Any, E]:
    """Convert a maybe-None value (or a Result holding one) into a Result.

    ``None`` and ``Ok(None)`` become ``Err(reason)``; an existing Err passes
    through with its own reason; any other value or Ok is returned as Ok.

    Example:
        >>> err_if_nil({"key": "value"}.get("missing"), "notfound")
        Err('notfound')
        >>> err_if_nil(Err("badthing"), "notfound")
        Err('badthing')
    """
    if isinstance(value, Result):
        if value.is_err():
            return value
        return Err(reason) if value.unwrap() is None else value
    return Err(reason) if value is None else Ok(value)
