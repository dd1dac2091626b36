# src/tasktime/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every path is injectable, so tests never touch the real data directory.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import TaskCategory
from .tasks.task_listing import DEFAULT_TIMESTAMP_FORMAT

ENV_PREFIX = "TASKTIME"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def executable_dir() -> Path:
    """Directory holding the running program (the console script or `python -m` target)."""
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not argv0 or argv0 == "-c":
        return Path.cwd()
    return Path(argv0).resolve().parent


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    # None means "same as data_dir".
    log_dir_override: Path | None

    # ---- Behaviour ----
    default_category: TaskCategory
    timestamp_format: str

    @property
    def log_dir(self) -> Path:
        return self.log_dir_override or self.data_dir

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasktime").strip() or "tasktime"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), None) or executable_dir()
        log_dir_override = _env_path(_k("LOG_DIR"), None)

        # Unknown values raise InvalidFormatError: a typo must not silently pick a store.
        default_category = TaskCategory.parse(_env(_k("DEFAULT_CATEGORY"), "current"))
        timestamp_format = _env(_k("TIMESTAMP_FORMAT"), DEFAULT_TIMESTAMP_FORMAT) or DEFAULT_TIMESTAMP_FORMAT

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            log_dir_override=log_dir_override,
            default_category=default_category,
            timestamp_format=timestamp_format,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, read from the environment (and a local .env) on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    global _SETTINGS
    _SETTINGS = None
