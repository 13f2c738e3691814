"""Contract violations raised by the result combinators.

Domain failures travel as ``Err`` values and are never raised by oxide.
What *is* raised are contract violations: a caller handed a non-result to
an operation, called ``unwrap_err`` on an ``Ok``, or unwrapped an ``Err``
whose reason is not itself an exception.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, ValidationError


class ErrorCode(StrEnum):
    """Machine-readable codes for contract violations."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_A_RESULT = "NOT_A_RESULT"
    NOT_CALLABLE = "NOT_CALLABLE"
    UNWRAP_ERR = "UNWRAP_ERR"
    UNWRAP_ON_OK = "UNWRAP_ON_OK"


def render_value(value: object, limit: int | None = None) -> str:
    """repr() of a payload, truncated to ``limit`` characters (settings default).

    Never raises: a malformed environment falls back to the default limit and
    a failing ``__repr__`` falls back to ``object.__repr__``.
    """
    if limit is None:
        limit = _repr_limit()
    try:
        text = repr(value)
    except Exception:
        text = object.__repr__(value)
    return text if len(text) <= limit else f"{text[:max(limit - 3, 0)]}..."


def _repr_limit() -> int:
    from ..config import OxideSettings, get_settings
    try:
        return get_settings().repr_limit
    except ValidationError:
        return OxideSettings.model_fields["repr_limit"].default


class Violation(BaseModel):
    """Structured description of a misuse of the result API.

    Example:
        >>> v = Violation.create("map", "map() expects a Result", received=42)
        >>> print(v.render())
        map() expects a Result (received 42)
    """

    operation: str = Field(default="", description="Operation that was misused")
    message: str = Field(..., description="Human-readable error message")
    code: ErrorCode = Field(default=ErrorCode.INVALID_ARGUMENT, description="Machine-readable error code")
    received: str | None = Field(default=None, description="Rendering of the offending value")

    @classmethod
    def create(
        cls,
        operation: str,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
        **kw: object,
    ) -> Self:
        """Factory method; pass ``received=<value>`` to attach a rendering of it."""
        received = render_value(kw["received"]) if "received" in kw else None
        return cls(operation=operation, message=message, code=code, received=received)

    def render(self) -> str:
        """Format violation as a one-line message."""
        suffix = f" (received {self.received})" if self.received is not None else ""
        return f"{self.message}{suffix}"

    def __str__(self) -> str:
        return self.render()


class ContractViolation(Exception):
    """Exception that wraps a Violation for raising."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, violation: Violation | str, operation: str = "") -> None:
        if isinstance(violation, str):
            violation = Violation(operation=operation, message=violation, code=self.code)
        self.violation = violation
        super().__init__(violation.render())

    @classmethod
    def create(cls, operation: str, message: str, **kw: object) -> Self:
        """Build the exception from its parts, defaulting to the subclass's code."""
        code = kw.pop("code", cls.code)
        return cls(Violation.create(operation, message, code, **kw))  # type: ignore[arg-type]


class InvalidArgument(ContractViolation, TypeError):
    """A value that is not a Result (or not callable) reached a combinator."""

    code = ErrorCode.INVALID_ARGUMENT


class NotAResult(ContractViolation, AssertionError):
    """Raised by ``assert_result`` for anything that is not a Result."""

    code = ErrorCode.NOT_A_RESULT


class UnwrapError(ContractViolation, RuntimeError):
    """Unwrapping the wrong variant."""

    code = ErrorCode.UNWRAP_ERR
