"""oxide - Result values and combinators for fallible Python code.

Results are ``Ok(value)`` or ``Err(reason)``. Combinators thread the Ok
value through a chain of steps and stop at the first Err, so multi-step
fallible code reads top to bottom without a check after every call.

Quick Start:
    >>> from oxide import Ok, Err, Result
    >>>
    >>> def double(x: int) -> Result[int, str]:
    ...     return Ok(x * 2)
    >>> def validate_positive(x: int) -> Result[int, str]:
    ...     return Ok(x) if x > 0 else Err("non_positive")
    >>>
    >>> Ok(5) >> double >> validate_positive >> double
    Ok(20)
    >>> Ok(-5) >> double >> validate_positive >> double
    Err('non_positive')

Free functions (Result first):
    >>> from oxide import functions as R
    >>> R.err_if_nil({"a": 1}.get("b"), "notfound")
    Err('notfound')
    >>> R.collect([R.ok(1), R.ok(2)])
    Ok([1, 2])

Exceptions in, exceptions out:
    >>> from oxide import attempt
    >>> r = attempt(int, "x")       # Err(ValueError(...))
    >>> r.unwrap()                  # re-raises that same ValueError

Reusable pipelines:
    >>> from oxide import pipe
    >>> checked = pipe(double, validate_positive).map(str)
    >>> checked.run(4)
    Ok('8')
"""

from __future__ import annotations

__version__ = "0.3.0"

# Errors
from .errors import ContractViolation, ErrorCode, InvalidArgument, NotAResult, UnwrapError, Violation

# Result
from .monads import (
    Err,
    Ok,
    Result,
    and_then,
    assert_result,
    attempt,
    chain,
    collect,
    err_if_nil,
    error,
    expect,
    from_tagged,
    functions,
    is_error,
    is_ok,
    is_result,
    map_err,
    map_or,
    ok,
    or_else,
    partition,
    safe,
    tap_err,
    tap_ok,
    traverse,
    unwrap,
    unwrap_err,
    unwrap_or,
    unwrap_or_else,
)

# Pipeline
from .pipeline import Pipeline, Step, pipe

# Config & logging
from .config import OxideSettings, clear_settings_cache, get_settings
from .observability import configure_logging

__all__ = [
    "__version__",
    # Result
    "Result", "Ok", "Err",
    "functions", "ok", "error", "is_ok", "is_error", "is_result", "assert_result",
    "chain", "map_err", "map_or", "and_then", "or_else", "tap_ok", "tap_err",
    "unwrap", "unwrap_or", "unwrap_or_else", "unwrap_err", "expect", "err_if_nil",
    "collect", "traverse", "partition",
    "attempt", "safe", "from_tagged",
    # Pipeline
    "Pipeline", "Step", "pipe",
    # Errors
    "ErrorCode", "Violation", "ContractViolation", "InvalidArgument", "NotAResult", "UnwrapError",
    # Config & logging
    "OxideSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
