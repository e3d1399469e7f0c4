# tests/test_actions.py

from __future__ import annotations

from pathlib import Path

import pytest

from devtasks.core.errors import DependencyResolutionFailed, SubprocessFailed
from devtasks.core.ports import CapturedOutput
from devtasks.tasks import actions

from .fakes import FakeWindowQuery


def test_screenshot_waits_queries_then_captures(ctx, runner, sleeper) -> None:
    assert actions.screenshot(ctx, Path("shot.png")) == 0

    assert sleeper.slept == [5.0]
    assert runner.captures == [("xdotool", "getactivewindow")]
    assert [c.argv for c in runner.calls] == [("maim", "-i", "12345", "shot.png")]


def test_screenshot_without_active_window_never_captures(ctx, runner) -> None:
    runner.outputs["xdotool"] = CapturedOutput(returncode=1, stdout="")

    with pytest.raises(DependencyResolutionFailed):
        actions.screenshot(ctx, Path("shot.png"))

    assert runner.calls == []


@pytest.mark.parametrize("stdout", ["", "\n", "0", "not-a-window", "12 34"])
def test_screenshot_invalid_window_id_is_dependency_failure(ctx, runner, stdout) -> None:
    runner.outputs["xdotool"] = CapturedOutput(returncode=0, stdout=stdout)

    with pytest.raises(DependencyResolutionFailed):
        actions.screenshot(ctx, Path("shot.png"))

    assert runner.calls == []


def test_screenshot_missing_query_program(ctx, runner) -> None:
    runner.outputs["xdotool"] = CapturedOutput(returncode=127, stdout="")

    with pytest.raises(DependencyResolutionFailed):
        actions.screenshot(ctx, Path("shot.png"))
    assert runner.calls == []


def test_screenshot_capture_failure_propagates_status(ctx, runner) -> None:
    runner.returncodes["maim"] = 3

    with pytest.raises(SubprocessFailed) as ei:
        actions.screenshot(ctx, Path("shot.png"))

    assert ei.value.returncode == 3
    assert ei.value.exit_code == 3


def test_screenshot_uses_injected_window_query(ctx, runner) -> None:
    ctx.window_query = FakeWindowQuery(window_id="0x3a00007")
    actions.screenshot(ctx, Path("a.png"))
    assert runner.calls[0].argv == ("maim", "-i", "0x3a00007", "a.png")
    assert runner.captures == []


def test_doc_runs_generator_once(ctx, runner) -> None:
    assert actions.build_docs(ctx) == 0
    assert [c.argv for c in runner.calls] == [("cargo", "doc", "--open")]


def test_doc_generator_missing_is_subprocess_failure(ctx, runner) -> None:
    runner.returncodes["cargo"] = 127

    with pytest.raises(SubprocessFailed) as ei:
        actions.build_docs(ctx)

    assert ei.value.exit_code == 127
    # No separate attempt to open a browser.
    assert len(runner.calls) == 1


def test_run_redirects_stderr_to_log(ctx, runner, settings) -> None:
    assert actions.run_binary(ctx) == 0
    assert runner.calls[0].argv == ("cargo", "run")
    assert runner.calls[0].stderr_path == Path(settings.run_log_path)


def test_run_propagates_exit_status(ctx, runner) -> None:
    runner.returncodes["cargo"] = 2

    with pytest.raises(SubprocessFailed) as ei:
        actions.run_binary(ctx)
    assert ei.value.exit_code == 2


def test_signal_exit_maps_to_shell_status() -> None:
    err = SubprocessFailed(["cargo", "run"], -15)
    assert err.exit_code == 143
    assert "SIGTERM" in str(err)

