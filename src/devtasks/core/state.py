# src/devtasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import ProcessRunner, Sleeper, WindowQuery


@dataclass(slots=True)
class TaskContext:
    # Settings are duck-typed so tests can pass a SimpleNamespace.
    settings: object

    runner: ProcessRunner
    sleeper: Sleeper
    window_query: WindowQuery

    dry_run: bool = False
    always: bool = False
