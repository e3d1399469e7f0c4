# src/devtasks/tasks/dispatcher.py

from __future__ import annotations

"""
Task dispatcher.

Per invocation: resolve every goal, then execute them one after another.
- Resolution happens up front, so an unknown goal means nothing runs.
- Execution is fail-fast: the first DevTaskError ends the invocation.
- Existing non-phony targets are up to date and skipped.
"""

import logging
from collections.abc import Sequence

from ..core.state import TaskContext
from .registry import TaskRegistry
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskDispatcher:
    def __init__(self, registry: TaskRegistry, ctx: TaskContext) -> None:
        self.registry = registry
        self.ctx = ctx

    def resolve(self, name_or_path: str) -> Task:
        return self.registry.resolve(name_or_path)

    def is_up_to_date(self, task: Task) -> bool:
        if task.target is None or task.phony or self.ctx.always:
            return False
        return task.target.exists()

    def execute(self, task: Task) -> int:
        """Run one task's action synchronously; errors propagate to the caller."""
        if self.is_up_to_date(task):
            logger.info("'%s' is up to date.", task.name)
            return 0

        logger.debug("Executing %s task '%s'", task.kind.value, task.name)
        status = task.action(self.ctx)
        logger.debug("Task '%s' finished with %s", task.name, status)
        return status

    def run_goals(self, goals: Sequence[str]) -> int:
        tasks = [self.resolve(g) for g in goals]
        for task in tasks:
            status = self.execute(task)
            if status != 0:
                return status
        return 0
