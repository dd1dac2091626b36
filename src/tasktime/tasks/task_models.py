# src/tasktime/tasks/task_models.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import StrEnum

from ..core.duration import format_duration, parse_time_token
from ..core.errors import (
    AlreadyRunningError,
    InsufficientDurationError,
    InvalidFormatError,
    NotRunningError,
    TaskBusyError,
)

logger = logging.getLogger(__name__)


class TaskCategory(StrEnum):
    """Which store file a command works on."""

    CURRENT = "current"
    ARCHIVE = "archive"

    @classmethod
    def parse(cls, raw: str | None) -> TaskCategory:
        value = (raw or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise InvalidFormatError(
                f"Could not find a valid task type '{raw}' ({choices})"
            ) from None


def _now(now: float | None) -> float:
    return time.time() if now is None else float(now)


@dataclass(slots=True)
class Task:
    """
    A named timer.

    State machine:
      stopped --start--> running --stop--> stopped (elapsed committed)
                                 --cancel-> stopped (elapsed discarded)

    `last_run` is the most recent start time. It survives stop/cancel so the
    listing can show when the task last ran; `running` alone tells whether a
    timer is active. Failed transitions leave every field untouched.
    """

    id: int
    name: str
    total_duration_seconds: int = 0
    running: bool = False
    last_run: float | None = None

    def __post_init__(self) -> None:
        if self.total_duration_seconds < 0:
            raise ValueError("total_duration_seconds must be non-negative")
        if self.running and self.last_run is None:
            raise ValueError("a running task needs a last_run timestamp")

    # ---- reads ----

    def elapsed_seconds(self, now: float | None = None) -> int:
        """Seconds since the last start, 0 when stopped or when the clock went backward."""
        if not self.running or self.last_run is None:
            return 0
        return max(0, int(_now(now) - self.last_run))

    def current_duration(self, now: float | None = None) -> int:
        return self.total_duration_seconds + self.elapsed_seconds(now)

    @property
    def base_duration(self) -> int:
        return self.total_duration_seconds

    def formatted_duration(self) -> str:
        return format_duration(self.total_duration_seconds)

    # ---- transitions ----

    def start(self, now: float | None = None) -> None:
        if self.running:
            raise AlreadyRunningError(self.id)
        self.last_run = _now(now)
        self.running = True
        logger.debug("Task %s started at %s", self.id, self.last_run)

    def stop(self, now: float | None = None) -> int:
        """Commit the running time into the total; returns the committed seconds."""
        if not self.running:
            raise NotRunningError(self.id)
        elapsed = self.elapsed_seconds(now)
        self.total_duration_seconds += elapsed
        self.running = False
        logger.debug("Task %s stopped (+%ss, total=%s)", self.id, elapsed, self.total_duration_seconds)
        return elapsed

    def cancel(self) -> None:
        """Stop without committing the time since the last start."""
        if not self.running:
            raise NotRunningError(self.id)
        self.running = False
        logger.debug("Task %s canceled (total=%s)", self.id, self.total_duration_seconds)

    def rename(self, name: str) -> None:
        self.name = name

    def add_time(self, token: str) -> int:
        seconds = parse_time_token(token)
        self.total_duration_seconds += seconds
        return self.total_duration_seconds

    def subtract_time(self, token: str) -> int:
        seconds = parse_time_token(token)
        if seconds > self.total_duration_seconds:
            raise InsufficientDurationError(self.id, seconds, self.total_duration_seconds)
        self.total_duration_seconds -= seconds
        return self.total_duration_seconds

    def set_time(self, token: str) -> int:
        if self.running:
            raise TaskBusyError(self.id, "setting a new time")
        self.total_duration_seconds = parse_time_token(token)
        return self.total_duration_seconds
