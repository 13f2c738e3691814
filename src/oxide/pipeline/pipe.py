"""Reusable short-circuiting pipelines of Result-returning steps.

A chain written with ``>>`` runs immediately on one value. A Pipeline is the
same chain captured once and run on many values:

    validate = pipe(parse_int, validate_positive).map(double)
    validate.run("21")   # Ok(42)
    validate.run("-1")   # Err(...), double never called

Pipelines are immutable; every builder method returns a new one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from ..config import get_settings
from ..errors import ErrorCode, InvalidArgument
from ..monads import Ok, Result

logger = logging.getLogger("oxide.pipeline")

StepKind = Literal["then", "map", "tap"]


def _callable_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


# ═════════════════════════════════════════════════════════════════════════════
# Step: function + how its output re-enters the rail
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Step:
    """A pipeline step.

    - ``then``: fn returns a Result, which becomes the current result
    - ``map``: fn returns a plain value, re-wrapped in Ok
    - ``tap``: fn is called for side effects, current result kept
    """

    fn: Callable[[Any], Any]
    kind: StepKind = "then"
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise InvalidArgument.create(
                "pipeline", "pipeline steps must be callable", code=ErrorCode.NOT_CALLABLE, received=self.fn
            )
        if not self.name:
            object.__setattr__(self, "name", _callable_name(self.fn))

    def apply(self, value: Any) -> Result[Any, Any]:
        if self.kind == "map":
            return Ok(self.fn(value))
        if self.kind == "tap":
            self.fn(value)
            return Ok(value)
        out = self.fn(value)
        if not isinstance(out, Result):
            raise InvalidArgument.create(
                "pipeline", f"step {self.name!r} must return a Result; use .map() for plain functions", received=out
            )
        return out


# ═════════════════════════════════════════════════════════════════════════════
# Pipeline: sequential composition
# ═════════════════════════════════════════════════════════════════════════════


class Pipeline:
    """Sequential composition of steps, short-circuiting on the first Err.

    Example:
        >>> double = lambda x: Ok(x * 2)
        >>> positive = lambda x: Ok(x) if x > 0 else Err("non_positive")
        >>> p = Pipeline() >> double >> positive >> double
        >>> p.run(5)
        Ok(20)
        >>> p(Ok(-5))
        Err('non_positive')
    """

    __slots__ = ("_steps", "_name")

    def __init__(self, steps: tuple[Step, ...] | list[Step] = (), *, name: str | None = None) -> None:
        self._steps = tuple(steps)
        self._name = name

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def name(self) -> str:
        """Explicit name, or the step names joined with ``>>``."""
        return self._name or " >> ".join(s.name for s in self._steps) or "<empty>"

    def _with(self, step: Step) -> Pipeline:
        return Pipeline((*self._steps, step), name=self._name)

    # ─── Builders ────────────────────────────────────────────────────────

    def then(self, fn: Callable[[Any], Result[Any, Any]]) -> Pipeline:
        """Add a Result-returning step."""
        return self._with(Step(fn, "then"))

    def map(self, fn: Callable[[Any], Any]) -> Pipeline:
        """Add a plain transform; its return value is wrapped in Ok."""
        return self._with(Step(fn, "map"))

    def tap(self, fn: Callable[[Any], object]) -> Pipeline:
        """Add a side-effect step on the Ok value."""
        return self._with(Step(fn, "tap"))

    def __rshift__(self, other: Callable[[Any], Result[Any, Any]] | Step | Pipeline) -> Pipeline:
        """Chain another step (or every step of another pipeline): self >> other."""
        if isinstance(other, Pipeline):
            return Pipeline((*self._steps, *other._steps), name=self._name)
        return self._with(other if isinstance(other, Step) else Step(other, "then"))

    # ─── Execution ───────────────────────────────────────────────────────

    def run(self, seed: Any) -> Result[Any, Any]:
        """Run the steps on ``seed`` (a raw value or a Result).

        Returns the first Err produced, or the final Ok. Steps after the
        failing one are never called.
        """
        current: Result[Any, Any] = seed if isinstance(seed, Result) else Ok(seed)
        trace = get_settings().trace_pipelines

        for index, step in enumerate(self._steps):
            if current.is_err():
                logger.debug(
                    "pipeline %s short-circuited before step %d (%s)",
                    self.name, index, step.name,
                    extra={"pipeline": self.name, "step_index": index, "step": step.name},
                )
                return current
            if trace:
                logger.debug("pipeline %s running step %d (%s)", self.name, index, step.name)
            current = step.apply(current.unwrap())
        return current

    def __call__(self, seed: Any) -> Result[Any, Any]:
        return self.run(seed)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Pipeline({self.name})"


def pipe(*fns: Callable[[Any], Result[Any, Any]], name: str | None = None) -> Pipeline:
    """Build a Pipeline of Result-returning steps."""
    return Pipeline(tuple(Step(fn, "then") for fn in fns), name=name)
