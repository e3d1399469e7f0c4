# src/devtasks/tasks/task_models.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from ..core.state import TaskContext

TaskAction = Callable[[TaskContext], int]


class TaskKind(StrEnum):
    SCREENSHOT = "screenshot"
    DOC = "doc"
    RUN = "run"


@dataclass(slots=True, frozen=True)
class Task:
    """
    A resolved, invocable unit of work.

    Notes:
    - `target` is only set for pattern-triggered tasks (screenshots).
    - `phony` targets run even when the target file already exists.
    """

    name: str
    kind: TaskKind
    action: TaskAction
    target: Path | None = None
    phony: bool = True


@dataclass(slots=True, frozen=True)
class PatternRule:
    name: str
    matcher: Callable[[str], bool]
    factory: Callable[[str], Task]
    help_text: str
