# src/devtasks/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Defaults reproduce the project's usual workflow (xdotool/maim, cargo).
- Every external command can be swapped without touching code.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "DEVTASKS"

# Look for .env from the working directory (the project), not from this file.
load_dotenv(find_dotenv(usecwd=True), override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


def _env_cmd(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        raw = default
    return tuple(shlex.split(raw))


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _normalize_extensions(exts: list[str]) -> tuple[str, ...]:
    out: list[str] = []
    for e in exts:
        e = e.strip().lower()
        if not e:
            continue
        out.append(e if e.startswith(".") else f".{e}")
    return tuple(out)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path | None

    # ---- Screenshot ----
    capture_delay_seconds: float
    window_query_cmd: tuple[str, ...]
    capture_cmd: tuple[str, ...]
    screenshot_extensions: tuple[str, ...]
    phony_targets: tuple[str, ...]

    # ---- Documentation ----
    doc_cmd: tuple[str, ...]

    # ---- Run ----
    run_cmd: tuple[str, ...]
    run_log_path: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "devtasks") or "devtasks",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_optional_path(_k("DATA_DIR")),
            capture_delay_seconds=_env_float(_k("CAPTURE_DELAY"), 5.0),
            window_query_cmd=_env_cmd(_k("WINDOW_QUERY_CMD"), "xdotool getactivewindow"),
            capture_cmd=_env_cmd(_k("CAPTURE_CMD"), "maim -i"),
            screenshot_extensions=_normalize_extensions(
                _env_list(_k("SCREENSHOT_EXTENSIONS"), [".png"])
            ),
            phony_targets=tuple(_env_list(_k("PHONY_TARGETS"), ["screenshot.png"])),
            doc_cmd=_env_cmd(_k("DOC_CMD"), "cargo doc --open"),
            run_cmd=_env_cmd(_k("RUN_CMD"), "cargo run"),
            run_log_path=_env_path(_k("RUN_LOG"), Path("log")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
