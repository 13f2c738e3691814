"""Conversions between Results and the outside world.

- attempt / safe: run code that raises, get a Result back
- from_tagged: accept ``("ok", v)`` / ``("error", e)`` pairs at a trust boundary
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, overload

from ..errors import InvalidArgument
from .result import Err, Ok, Result

P = ParamSpec("P")
T = TypeVar("T")

_TAGS = {"ok": True, "error": False}


def attempt(
    fn: Callable[..., T],
    *args: Any,
    catch: tuple[type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> Result[T, BaseException]:
    """Call ``fn(*args, **kwargs)``, returning Ok(value) or Err(exception).

    Only exceptions matching ``catch`` are captured; others propagate.
    ``unwrap()`` on the Err re-raises the very same exception object.

    Example:
        >>> attempt(int, "42")
        Ok(42)
        >>> attempt(int, "x").is_err()
        True
    """
    try:
        return Ok(fn(*args, **kwargs))
    except catch as e:
        return Err(e)


@overload
def safe(fn: Callable[P, T], /) -> Callable[P, Result[T, BaseException]]: ...
@overload
def safe(
    *, catch: tuple[type[BaseException], ...] = ...
) -> Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]: ...
def safe(
    fn: Callable[P, T] | None = None,
    /,
    *,
    catch: tuple[type[BaseException], ...] = (Exception,),
) -> Any:
    """Decorator form of ``attempt``.

    Example:
        >>> @safe
        ... def divide(a: float, b: float) -> float:
        ...     return a / b
        >>> divide(1, 0).is_err()
        True
    """

    def decorate(func: Callable[P, T]) -> Callable[P, Result[T, BaseException]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, BaseException]:
            return attempt(func, *args, catch=catch, **kwargs)
        return wrapper

    return decorate(fn) if fn is not None else decorate


def from_tagged(value: object) -> Result[Any, Any]:
    """Build a Result from a ``("ok", v)`` or ``("error", e)`` pair.

    Anything else (a bare ``("ok",)``, extra fields, unknown tags, non-tuples)
    is rejected with InvalidArgument. Lists are accepted as well as tuples
    since that is what a JSON round trip produces.
    """
    if isinstance(value, (tuple, list)) and len(value) == 2 and isinstance(value[0], str) and value[0] in _TAGS:
        return Result(value[1], _TAGS[value[0]])
    raise InvalidArgument.create("from_tagged", "expected an ('ok', value) or ('error', reason) pair", received=value)
