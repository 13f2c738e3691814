"""Reusable short-circuiting pipelines."""

from .pipe import Pipeline, Step, pipe

__all__ = ["Pipeline", "Step", "pipe"]
