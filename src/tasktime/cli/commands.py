# src/tasktime/cli/commands.py

"""
Command handlers.

Each handler applies one operation to `state.store` and returns the reply to
print. Business-rule violations are raised as TaskError; the CLI runner prints
them and saves the store either way.
"""

from __future__ import annotations

import logging

from ..core.duration import format_duration
from ..core.state import AppState
from ..tasks.task_listing import build_listing
from ..tasks.task_models import TaskCategory

logger = logging.getLogger(__name__)


def cmd_list(
    state: AppState,
    *,
    show_all: bool = False,
    show_timestamp: bool = False,
    show_base: bool = False,
) -> str:
    listing = build_listing(
        state.store,
        show_all=show_all,
        show_timestamp=show_timestamp,
        show_base=show_base,
        now=state.now(),
        timestamp_format=state.settings.timestamp_format,
    )
    return listing.render()


def cmd_create(state: AppState, name: str, *, start: bool = False) -> str:
    task = state.store.create(name, start=start, now=state.now())
    return f"Task {task.name} created with id {task.id}"


def cmd_delete(state: AppState, task_id: int) -> str:
    state.store.remove_by_id(task_id)
    return f"Task {task_id} deleted"


def cmd_delete_by_name(state: AppState, name: str) -> str:
    task = state.store.remove_by_name(name)
    return f"Task {task.id} '{task.name}' deleted"


def cmd_start(state: AppState, task_id: int) -> str:
    state.store.get(task_id).start(state.now())
    return f"Task {task_id} started"


def cmd_stop(state: AppState, task_id: int) -> str:
    task = state.store.get(task_id)
    task.stop(state.now())
    return f"Task {task_id} stopped, total: {task.formatted_duration()}"


def cmd_cancel(state: AppState, task_id: int) -> str:
    state.store.get(task_id).cancel()
    return f"Task {task_id} canceled"


def cmd_rename(state: AppState, task_id: int, name: str) -> str:
    state.store.get(task_id).rename(name)
    return f"Task {task_id} renamed to {name}"


def cmd_add(state: AppState, task_id: int, token: str) -> str:
    total = state.store.get(task_id).add_time(token)
    return f"Added {token} to task {task_id}, new timer: {format_duration(total)}"


def cmd_sub(state: AppState, task_id: int, token: str) -> str:
    total = state.store.get(task_id).subtract_time(token)
    return f"Subtracted {token} from task {task_id}, new timer: {format_duration(total)}"


def cmd_set(state: AppState, task_id: int, token: str) -> str:
    state.store.get(task_id).set_time(token)
    return f"New time {token} set for task {task_id}"


def cmd_archive(state: AppState, task_id: int) -> str:
    """
    Move a stopped task from the current store to the archive store.

    The archive store is saved here, right after the move; the source store is
    saved by the runner like for every other command.
    """
    if state.category == TaskCategory.ARCHIVE:
        return "Cannot archive archived tasks"

    archive_store = state.repo.load(TaskCategory.ARCHIVE)
    archived = state.store.archive(task_id, archive_store)
    state.repo.save(TaskCategory.ARCHIVE, archive_store)
    logger.info("Task %s archived with archive id %s", task_id, archived.id)
    return f"Task {task_id} archived with archive id {archived.id}"


def cmd_clear(state: AppState) -> str:
    if state.store.clear(state.confirmer, state.category):
        return "Tasks cleared."
    return "Clearing canceled."
