"""Shared fixtures."""

import logging

import pytest

from oxide.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate each test from OXIDE_* variables and the cached settings."""
    import os
    for key in [k for k in os.environ if k.startswith("OXIDE_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def oxide_logger() -> object:
    """The package root logger, with handlers and level restored afterwards."""
    log = logging.getLogger("oxide")
    handlers, level = list(log.handlers), log.level
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)


class Recorder:
    """Callable that records every argument it is called with."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[object] = []
        self.returns = returns

    def __call__(self, *args: object) -> object:
        self.calls.append(args[0] if len(args) == 1 else args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> type[Recorder]:
    return Recorder
