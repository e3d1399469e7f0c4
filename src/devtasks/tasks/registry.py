# src/devtasks/tasks/registry.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import partial
from pathlib import Path

from ..core.errors import UnknownTask
from . import actions
from .task_models import PatternRule, Task, TaskAction, TaskKind

logger = logging.getLogger(__name__)


class TaskRegistry:
    """Named tasks plus ordered path-pattern rules (first match wins)."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._help: dict[str, str] = {}
        self._rules: list[PatternRule] = []

    def register(
        self,
        name: str,
        kind: TaskKind,
        action: TaskAction,
        help_text: str,
    ) -> None:
        self._tasks[name] = Task(name=name, kind=kind, action=action)
        self._help[name] = help_text

    def register_pattern(self, rule: PatternRule) -> None:
        self._rules.append(rule)

    def resolve(self, name_or_path: str) -> Task:
        """
        Explicit names first, then pattern rules in registration order.
        Raises UnknownTask when nothing matches.
        """
        key = (name_or_path or "").strip()
        if not key:
            raise UnknownTask(name_or_path)

        task = self._tasks.get(key)
        if task is not None:
            return task

        for rule in self._rules:
            if rule.matcher(key):
                logger.debug("'%s' matched pattern rule %s", key, rule.name)
                return rule.factory(key)

        raise UnknownTask(key)

    def build_help(self) -> str:
        lines = ["Available tasks:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        for rule in self._rules:
            lines.append(f"  {rule.name} - {rule.help_text}")
        return "\n".join(lines)


def _has_extension(extensions: tuple[str, ...], arg: str) -> bool:
    path = Path(arg)
    return bool(path.stem) and path.suffix.lower() in extensions


def _screenshot_task(phony_targets: tuple[str, ...], arg: str) -> Task:
    target = Path(arg)
    return Task(
        name=arg,
        kind=TaskKind.SCREENSHOT,
        action=partial(_capture_into, target),
        target=target,
        phony=arg in phony_targets,
    )


def _capture_into(target: Path, ctx) -> int:
    return actions.screenshot(ctx, target)


def build_registry(settings) -> TaskRegistry:
    """The project's task table: doc, run and screenshot image paths."""
    extensions = tuple(getattr(settings, "screenshot_extensions", (".png",)))
    phony: Iterable[str] = getattr(settings, "phony_targets", ())

    reg = TaskRegistry()
    reg.register("doc", TaskKind.DOC, actions.build_docs, help_text="Build and open the documentation.")
    reg.register("run", TaskKind.RUN, actions.run_binary, help_text="Run the binary, stderr -> log file.")
    reg.register_pattern(
        PatternRule(
            name=" | ".join(f"<path>{e}" for e in extensions) or "<image>",
            matcher=partial(_has_extension, extensions),
            factory=partial(_screenshot_task, tuple(phony)),
            help_text="Capture the active window after a short delay.",
        )
    )
    return reg
