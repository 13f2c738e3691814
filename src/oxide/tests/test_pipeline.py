"""Tests for reusable pipelines."""

from __future__ import annotations

import logging

import pytest

from oxide import Err, InvalidArgument, Ok, Pipeline, Result, Step, pipe


def double(x: int) -> Result[int, str]:
    return Ok(x * 2)


def validate_positive(x: int) -> Result[int, str]:
    return Ok(x) if x > 0 else Err("non_positive")


def test_pipeline_success_path() -> None:
    p = Pipeline() >> double >> validate_positive >> double
    assert p.run(5) == Ok(20)
    assert p(Ok(5)) == Ok(20)


def test_pipeline_error_path_skips_later_steps(recorder) -> None:
    final = recorder(returns=Ok("never"))
    p = pipe(double, validate_positive, final)
    assert p.run(-5) == Err("non_positive")
    assert final.count == 0


def test_pipeline_seeded_with_err_runs_nothing(recorder) -> None:
    first = recorder(returns=Ok(1))
    seed = Err("upstream")
    assert pipe(first).run(seed) is seed
    assert first.count == 0


def test_map_stage_after_failure_is_skipped(recorder) -> None:
    render = recorder(returns="rendered")
    p = pipe(validate_positive).map(render)
    assert p.run(-1) == Err("non_positive")
    assert render.count == 0
    assert p.run(3) == Ok("rendered")
    assert render.calls == [3]


def test_tap_stage(recorder) -> None:
    seen = recorder(returns="ignored")
    p = pipe(double).tap(seen).then(validate_positive)
    assert p.run(2) == Ok(4)
    assert seen.calls == [4]


def test_then_step_must_return_result() -> None:
    p = Pipeline().then(lambda x: x + 1)
    with pytest.raises(InvalidArgument, match="must return a Result"):
        p.run(1)


def test_steps_must_be_callable() -> None:
    with pytest.raises(InvalidArgument):
        Pipeline() >> "not callable"  # type: ignore[operator]


def test_pipelines_are_immutable_and_composable() -> None:
    base = pipe(double)
    longer = base >> validate_positive
    assert len(base) == 1
    assert len(longer) == 2
    combined = base >> pipe(double, double)
    assert combined.run(1) == Ok(8)


def test_pipeline_as_chain_continuation() -> None:
    assert (Ok(5) >> pipe(double, validate_positive)) == Ok(10)
    assert (Err("e") >> pipe(double)) == Err("e")


def test_empty_pipeline_wraps_seed() -> None:
    assert Pipeline().run(3) == Ok(3)


def test_names() -> None:
    assert pipe(double, validate_positive).name == "double >> validate_positive"
    assert pipe(double, name="doubler").name == "doubler"
    assert Step(double).name == "double"
    assert repr(Pipeline()) == "Pipeline(<empty>)"


def test_short_circuit_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    p = pipe(validate_positive, double, name="check")
    with caplog.at_level(logging.DEBUG, logger="oxide.pipeline"):
        p.run(-1)
    records = [r for r in caplog.records if r.name == "oxide.pipeline"]
    assert len(records) == 1
    assert "short-circuited before step 1 (double)" in records[0].getMessage()
    assert records[0].step_index == 1


def test_trace_pipelines_setting(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    from oxide.config import clear_settings_cache

    monkeypatch.setenv("OXIDE_TRACE_PIPELINES", "true")
    clear_settings_cache()
    with caplog.at_level(logging.DEBUG, logger="oxide.pipeline"):
        pipe(double, double).run(1)
    messages = [r.getMessage() for r in caplog.records if r.name == "oxide.pipeline"]
    assert messages == [
        "pipeline double >> double running step 0 (double)",
        "pipeline double >> double running step 1 (double)",
    ]
