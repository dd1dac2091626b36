# src/tasktime/tasks/task_listing.py

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime

from ..core.duration import format_duration
from .task_models import Task
from .task_store import TaskStore

DEFAULT_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass(frozen=True, slots=True)
class ListedTask:
    task: Task
    current_seconds: int


@dataclass(frozen=True, slots=True)
class TaskListing:
    show_all: bool
    show_timestamp: bool
    show_base: bool
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    items: list[ListedTask] = field(default_factory=list)

    @property
    def total_seconds(self) -> int:
        return sum(i.current_seconds for i in self.items)

    @property
    def empty_message(self) -> str:
        return "There are no tasks." if self.show_all else "There are no running tasks."

    def render_task(self, item: ListedTask) -> str:
        task = item.task
        prefix = "#" if task.running else ""
        line = f"{prefix}[{task.id}] '{task.name}': {format_duration(item.current_seconds)}"
        if self.show_base:
            line += f" (base: {format_duration(task.base_duration)})"
        if self.show_timestamp and task.last_run is not None:
            stamp = datetime.fromtimestamp(task.last_run).strftime(self.timestamp_format)
            line += f" - Last time: {stamp}"
        return line

    def render(self) -> str:
        if not self.items:
            return self.empty_message
        lines = [self.render_task(i) for i in self.items]
        lines.append("")
        lines.append(f"Total: {format_duration(self.total_seconds)}")
        return "\n".join(lines)


def build_listing(
    store: TaskStore,
    *,
    show_all: bool = False,
    show_timestamp: bool = False,
    show_base: bool = False,
    now: float | None = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> TaskListing:
    """Running tasks (or all of them) in ascending id order, with durations frozen at `now`."""
    if now is None:
        now = time.time()
    items = [ListedTask(task=t, current_seconds=t.current_duration(now)) for t in store.select(show_all=show_all)]
    return TaskListing(
        show_all=show_all,
        show_timestamp=show_timestamp,
        show_base=show_base,
        timestamp_format=timestamp_format,
        items=items,
    )
