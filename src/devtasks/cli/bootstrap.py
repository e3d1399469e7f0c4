# src/devtasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks real or dry-run collaborators,
- wires them into a TaskContext and a TaskDispatcher.
"""

from __future__ import annotations

from ..config import get_settings
from ..core.state import TaskContext
from ..runtime.process import (
    DryRunRunner,
    DryRunSleeper,
    DryRunWindowQuery,
    SubprocessRunner,
    SystemSleeper,
    X11WindowQuery,
)
from ..tasks.dispatcher import TaskDispatcher
from ..tasks.registry import build_registry


def create_context(*, settings=None, dry_run: bool = False, always: bool = False) -> TaskContext:
    """
    Build the TaskContext for one invocation.

    Settings stay injectable so tests can avoid reading the real environment.
    """
    if settings is None:
        settings = get_settings()

    if dry_run:
        return TaskContext(
            settings=settings,
            runner=DryRunRunner(),
            sleeper=DryRunSleeper(),
            window_query=DryRunWindowQuery(settings.window_query_cmd),
            dry_run=True,
            always=always,
        )

    runner = SubprocessRunner()
    return TaskContext(
        settings=settings,
        runner=runner,
        sleeper=SystemSleeper(),
        window_query=X11WindowQuery(runner, settings.window_query_cmd),
        always=always,
    )


def create_dispatcher(*, settings=None, dry_run: bool = False, always: bool = False) -> TaskDispatcher:
    if settings is None:
        settings = get_settings()
    ctx = create_context(settings=settings, dry_run=dry_run, always=always)
    return TaskDispatcher(build_registry(settings), ctx)
