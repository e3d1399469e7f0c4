# src/devtasks/tasks/actions.py

"""
Task bodies.

Each action runs its steps in order and stops at the first failure by raising
a DevTaskError. Partial side effects (an already truncated log, a screenshot
written by an earlier invocation) are left as they are.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import SubprocessFailed
from ..core.state import TaskContext

logger = logging.getLogger(__name__)


def screenshot(ctx: TaskContext, target: Path) -> int:
    """Wait, look up the focused window, capture only that window into target."""
    settings = ctx.settings
    delay = float(getattr(settings, "capture_delay_seconds", 5.0))

    logger.info("Capturing active window in %gs -> %s", delay, target)
    ctx.sleeper.sleep(delay)

    # Raises DependencyResolutionFailed; the capture must not run without an id.
    window_id = ctx.window_query.active_window_id()
    logger.debug("Active window: %s", window_id)

    argv = [*settings.capture_cmd, window_id, str(target)]
    rc = ctx.runner.run(argv)
    if rc != 0:
        raise SubprocessFailed(argv, rc)
    return 0


def build_docs(ctx: TaskContext) -> int:
    # Opening the result is the generator's job (cargo doc --open).
    argv = list(ctx.settings.doc_cmd)
    rc = ctx.runner.run(argv)
    if rc != 0:
        raise SubprocessFailed(argv, rc)
    return 0


def run_binary(ctx: TaskContext) -> int:
    """
    Run the project binary with stderr -> log file (truncated), stdout untouched.

    LogRedirectionFailed comes from the runner before anything is launched;
    otherwise the binary's own exit status decides the outcome.
    """
    argv = list(ctx.settings.run_cmd)
    log_path = Path(ctx.settings.run_log_path)
    rc = ctx.runner.run(argv, stderr_path=log_path)
    if rc != 0:
        raise SubprocessFailed(argv, rc)
    return 0
