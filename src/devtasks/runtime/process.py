# src/devtasks/runtime/process.py

"""
Concrete collaborators for the task actions.

- SubprocessRunner: blocking subprocess launches, optional stderr -> file.
- SystemSleeper: time.sleep on the calling thread.
- X11WindowQuery: active window id via an external query program (xdotool).
- DryRun*: log what would happen, launch nothing.
"""

from __future__ import annotations

import logging
import re
import shlex
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path

from ..core.errors import EXIT_NOT_FOUND, DependencyResolutionFailed, LogRedirectionFailed
from ..core.ports import CapturedOutput, ProcessRunner

logger = logging.getLogger(__name__)

# Shell convention for "found but not executable".
EXIT_NOT_EXECUTABLE = 126

_WINDOW_ID_RE = re.compile(r"^(?:0x[0-9a-fA-F]+|[0-9]+)$")


def _fmt(argv: Sequence[str], stderr_path: Path | None = None) -> str:
    text = shlex.join(argv)
    if stderr_path is not None:
        text = f"{text} 2> {shlex.quote(str(stderr_path))}"
    return text


def _open_truncated(path: Path):
    try:
        return open(path, "wb")
    except OSError as e:
        raise LogRedirectionFailed(path, e.strerror or str(e)) from e


class SubprocessRunner:
    def run(self, argv: Sequence[str], *, stderr_path: Path | None = None) -> int:
        if stderr_path is None:
            return self._spawn(argv, stderr=None)

        # Truncate before launching: each run starts with a fresh log.
        with _open_truncated(Path(stderr_path)) as fh:
            return self._spawn(argv, stderr=fh, stderr_path=stderr_path)

    def capture(self, argv: Sequence[str]) -> CapturedOutput:
        logger.debug("Capturing output of: %s", _fmt(argv))
        try:
            proc = subprocess.run(list(argv), stdout=subprocess.PIPE, text=True, check=False)
        except FileNotFoundError:
            logger.debug("Program not found: %s", argv[0])
            return CapturedOutput(returncode=EXIT_NOT_FOUND, stdout="")
        except PermissionError:
            return CapturedOutput(returncode=EXIT_NOT_EXECUTABLE, stdout="")
        return CapturedOutput(returncode=proc.returncode, stdout=proc.stdout or "")

    def _spawn(self, argv: Sequence[str], *, stderr, stderr_path: Path | None = None) -> int:
        logger.info("%s", _fmt(argv, stderr_path))
        try:
            proc = subprocess.run(list(argv), stderr=stderr, check=False)
        except FileNotFoundError:
            logger.error("%s: command not found", argv[0])
            return EXIT_NOT_FOUND
        except PermissionError:
            logger.error("%s: permission denied", argv[0])
            return EXIT_NOT_EXECUTABLE
        logger.debug("%s exited with %s", argv[0], proc.returncode)
        return proc.returncode


class SystemSleeper:
    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class X11WindowQuery:
    """Ask the window manager for the focused window through an external program."""

    def __init__(self, runner: ProcessRunner, argv: Sequence[str]) -> None:
        self._runner = runner
        self._argv = tuple(argv)

    def active_window_id(self) -> str:
        out = self._runner.capture(self._argv)
        if out.returncode != 0:
            raise DependencyResolutionFailed(
                "active window",
                f"{self._argv[0]} exited with status {out.returncode}",
            )

        window_id = out.stdout.strip()
        if not is_valid_window_id(window_id):
            raise DependencyResolutionFailed(
                "active window", f"invalid window id {window_id!r}"
            )
        return window_id


def is_valid_window_id(raw: str) -> bool:
    """X11 window ids are non-zero integers, decimal or 0x-prefixed hex."""
    if not _WINDOW_ID_RE.match(raw):
        return False
    if raw.startswith("0x"):
        return int(raw, 16) != 0
    return int(raw) != 0


class DryRunRunner:
    def run(self, argv: Sequence[str], *, stderr_path: Path | None = None) -> int:
        logger.info("would run: %s", _fmt(argv, stderr_path))
        return 0

    def capture(self, argv: Sequence[str]) -> CapturedOutput:
        logger.info("would query: %s", _fmt(argv))
        return CapturedOutput(returncode=0, stdout="")


class DryRunSleeper:
    def sleep(self, seconds: float) -> None:
        logger.info("would wait %gs", seconds)


class DryRunWindowQuery:
    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = tuple(argv)

    def active_window_id(self) -> str:
        return f"$({shlex.join(self._argv)})"
