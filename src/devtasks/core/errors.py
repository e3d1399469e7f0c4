# src/devtasks/core/errors.py

"""
Error kinds raised while resolving or executing a task.

Every error is fatal to the current invocation. The CLI turns them into the
process exit status via `exit_code`; nothing is retried.
"""

from __future__ import annotations

import signal
from collections.abc import Sequence

# Shell convention for "command not found".
EXIT_NOT_FOUND = 127


class DevTaskError(Exception):
    exit_code: int = 1


class UnknownTask(DevTaskError):
    exit_code = 2

    def __init__(self, name: str) -> None:
        super().__init__(f"No rule to make target '{name}'.")
        self.name = name


class DependencyResolutionFailed(DevTaskError):
    """A query whose result feeds a later step did not succeed."""

    def __init__(self, what: str, detail: str = "") -> None:
        msg = f"Could not resolve {what}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.what = what


class SubprocessFailed(DevTaskError):
    """An external program exited non-zero (or could not be started)."""

    def __init__(self, argv: Sequence[str], returncode: int) -> None:
        self.argv = tuple(argv)
        self.returncode = returncode
        super().__init__(f"{_describe(argv)} failed with {_describe_status(returncode)}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Negative return codes mean "killed by signal N".
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode or 1


class LogRedirectionFailed(DevTaskError):
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot open log file {path}: {reason}")
        self.path = path


def _describe(argv: Sequence[str]) -> str:
    return argv[0] if argv else "<empty command>"


def _describe_status(returncode: int) -> str:
    if returncode == EXIT_NOT_FOUND:
        return "exit status 127 (command not found)"
    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            name = f"signal {-returncode}"
        return f"{name}"
    return f"exit status {returncode}"
