# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from devtasks.core.state import TaskContext
from devtasks.runtime.process import X11WindowQuery

from .fakes import FakeRunner, FakeSleeper


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with TaskContext and the actions.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment.
    """
    return SimpleNamespace(
        app_name="devtasks",
        log_level="INFO",
        data_dir=None,
        capture_delay_seconds=5.0,
        window_query_cmd=("xdotool", "getactivewindow"),
        capture_cmd=("maim", "-i"),
        screenshot_extensions=(".png",),
        phony_targets=("screenshot.png",),
        doc_cmd=("cargo", "doc", "--open"),
        run_cmd=("cargo", "run"),
        run_log_path=tmp_path / "log",
    )


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture()
def ctx(settings: SimpleNamespace, runner: FakeRunner, sleeper: FakeSleeper) -> TaskContext:
    """
    TaskContext wired with recording fakes.

    The window query is the real X11WindowQuery on top of the fake runner,
    so its exit-status and id validation are exercised too.
    """
    return TaskContext(
        settings=settings,
        runner=runner,
        sleeper=sleeper,
        window_query=X11WindowQuery(runner, settings.window_query_cmd),
    )
