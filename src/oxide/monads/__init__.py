"""Result type and combinators.

Example:
    >>> from oxide.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> (divide(10, 2) >> (lambda x: Ok(x * 2))).map(lambda x: x + 1)
    Ok(11.0)
"""

from . import functions
from .functions import (
    and_then,
    assert_result,
    chain,
    err_if_nil,
    error,
    expect,
    is_error,
    is_ok,
    is_result,
    map,
    map_err,
    map_or,
    ok,
    or_else,
    tap_err,
    tap_ok,
    unwrap,
    unwrap_err,
    unwrap_or,
    unwrap_or_else,
)
from .interop import attempt, from_tagged, safe
from .result import Err, Ok, Result, collect, ensure_result, partition, traverse

__all__ = [
    # Core type
    "Result", "Ok", "Err", "ensure_result",
    # Free functions
    "functions", "ok", "error", "is_ok", "is_error", "is_result", "assert_result",
    "chain", "map", "map_err", "map_or", "and_then", "or_else", "tap_ok", "tap_err",
    "unwrap", "unwrap_or", "unwrap_or_else", "unwrap_err", "expect", "err_if_nil",
    # Collection ops
    "collect", "traverse", "partition",
    # Interop
    "attempt", "safe", "from_tagged",
]
