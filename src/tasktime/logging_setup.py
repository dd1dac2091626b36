# src/tasktime/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tasktime.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr clean for a command-line tool:
    - allow tasktime logs (the handler level decides how many)
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "tasktime" or name.startswith("tasktime."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(str(name or "").upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> Path | None:
    """
    Configure logging with:
    - Console handler (stderr): filtered, WARNING by default so replies stay readable
    - File handler: full logs for debugging (optional)

    Call this ONCE per process, before the first command runs.
    Returns the log file path, or None when file logging is off.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_to_file and log_dir is not None:
        log_dir = Path(log_dir)
        log_file = log_dir / LOG_FILE_NAME
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(log_file), encoding="utf-8")
        except OSError:
            # A read-only install dir should not stop the tracker from working.
            logging.getLogger(__name__).warning("Cannot write log file %s", log_file, exc_info=True)
            log_file = None
        else:
            fh.setLevel(file_level)
            fh.setFormatter(fmt)
            root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file
