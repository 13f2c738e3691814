"""Tests for settings, logging setup and violation models."""

from __future__ import annotations

import io
import json
import logging

import pytest

from oxide import ContractViolation, Err, ErrorCode, InvalidArgument, Ok, UnwrapError, Violation, functions
from oxide.config import OxideSettings, clear_settings_cache, get_settings
from oxide.errors import render_value
from oxide.observability import configure_logging


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults() -> None:
    s = get_settings()
    assert s.trace_pipelines is False
    assert s.repr_limit == 200
    assert s.logging.level == "WARNING"
    assert s.logging.format == "text"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OXIDE_REPR_LIMIT", "40")
    monkeypatch.setenv("OXIDE_LOG_LEVEL", "debug")
    monkeypatch.setenv("OXIDE_LOG_FORMAT", "json")
    clear_settings_cache()
    s = get_settings()
    assert s.repr_limit == 40
    assert s.logging.level == "DEBUG"
    assert s.logging.format == "json"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_repr_limit_validated() -> None:
    with pytest.raises(ValueError):
        OxideSettings(repr_limit=1)


def test_render_value_truncates() -> None:
    assert render_value("abc") == "'abc'"
    assert render_value("x" * 50, limit=20) == "'xxxxxxxxxxxxxxxx..."
    assert len(render_value("x" * 50, limit=20)) == 20


class BrokenRepr:
    def __repr__(self) -> str:
        raise RuntimeError("repr boom")


def test_render_value_survives_failing_repr() -> None:
    assert "BrokenRepr object at" in render_value(BrokenRepr())
    with pytest.raises(UnwrapError, match="BrokenRepr object at"):
        Err(BrokenRepr()).unwrap()


def test_error_messages_survive_malformed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OXIDE_REPR_LIMIT", "abc")
    clear_settings_cache()
    with pytest.raises(UnwrapError, match="Unwrapped an error: 'x'"):
        Err("x").unwrap()
    with pytest.raises(UnwrapError):
        Ok(1).unwrap_err()
    with pytest.raises(InvalidArgument):
        functions.map(None, str)


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_configure_logging_text(oxide_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging(OxideSettings(logging={"level": "INFO"}), stream=stream)
    logging.getLogger("oxide.pipeline").info("hello %s", "world")
    assert "[INFO] oxide.pipeline: hello world" in stream.getvalue()
    assert oxide_logger.level == logging.INFO


def test_configure_logging_json(oxide_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging(OxideSettings(logging={"level": "DEBUG", "format": "json"}), stream=stream)
    logging.getLogger("oxide.pipeline").debug("short", extra={"step_index": 2})
    entry = json.loads(stream.getvalue().strip())
    assert entry["event"] == "short"
    assert entry["level"] == "debug"
    assert entry["logger"] == "oxide.pipeline"
    assert entry["step_index"] == 2


def test_configure_logging_is_idempotent(oxide_logger: logging.Logger) -> None:
    configure_logging()
    configure_logging()
    named = [h for h in oxide_logger.handlers if h.get_name() == "oxide-default"]
    assert len(named) == 1


# ═════════════════════════════════════════════════════════════════════════════
# Violations
# ═════════════════════════════════════════════════════════════════════════════


def test_violation_render() -> None:
    v = Violation.create("map", "map() expects a Result", received=42)
    assert v.render() == "map() expects a Result (received 42)"
    assert v.code is ErrorCode.INVALID_ARGUMENT
    assert str(Violation(message="plain")) == "plain"


def test_contract_violation_hierarchy() -> None:
    exc = InvalidArgument.create("map", "map() expects a Result", received=None)
    assert isinstance(exc, TypeError)
    assert isinstance(exc, ContractViolation)
    assert str(exc) == "map() expects a Result (received None)"
    assert exc.violation.operation == "map"

    unwrap = UnwrapError("Unwrapped an error: 'x'", operation="unwrap")
    assert isinstance(unwrap, RuntimeError)
    assert unwrap.violation.code is ErrorCode.UNWRAP_ERR
    assert unwrap.violation.model_dump()["operation"] == "unwrap"
