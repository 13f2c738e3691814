"""Contract-violation errors for oxide.

- ErrorCode: machine-readable violation codes
- Violation: structured description (pydantic model)
- ContractViolation and its builtin-compatible subclasses
"""

from .errors import (
    ContractViolation,
    ErrorCode,
    InvalidArgument,
    NotAResult,
    UnwrapError,
    Violation,
    render_value,
)

__all__ = [
    "ErrorCode", "Violation", "render_value",
    "ContractViolation", "InvalidArgument", "NotAResult", "UnwrapError",
]
