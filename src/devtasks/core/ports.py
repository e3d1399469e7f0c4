# src/devtasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task actions.

Actions depend on Protocols instead of concrete implementations, so the real
subprocess runner can be replaced by a dry-run runner or by test fakes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence


@dataclass(slots=True, frozen=True)
class CapturedOutput:
    returncode: int
    stdout: str


class ProcessRunner(Protocol):
    """Blocking process launcher."""

    def run(self, argv: Sequence[str], *, stderr_path: Path | None = None) -> int:
        """
        Run argv to completion and return its exit status.

        stdout is inherited. When stderr_path is given the runner opens it with
        truncation before launching; failure to open raises LogRedirectionFailed.
        A missing program reports EXIT_NOT_FOUND rather than raising.
        """
        ...

    def capture(self, argv: Sequence[str]) -> CapturedOutput:
        """Run argv and collect its stdout (stderr stays inherited)."""
        ...


class Sleeper(Protocol):
    def sleep(self, seconds: float) -> None: ...


class WindowQuery(Protocol):
    def active_window_id(self) -> str:
        """Return the focused window id or raise DependencyResolutionFailed."""
        ...
