# src/tasktime/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings once,
- wires the JSON repository, wall clock and console prompt into AppState,
- loads the store for the selected category and writes it back afterwards.
"""

from __future__ import annotations

import logging
import time

from ..config import Settings, get_settings
from ..connectors.console_connector import ConsoleConfirmer
from ..core.ports import Clock, Confirmer, TaskRepository
from ..core.state import AppState
from ..tasks.task_files import JsonTaskRepository
from ..tasks.task_models import TaskCategory

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings: Settings | None = None,
    category: TaskCategory | None = None,
    repo: TaskRepository | None = None,
    clock: Clock | None = None,
    confirmer: Confirmer | None = None,
) -> AppState:
    """
    Create AppState and load the store for `category`.

    Keeping every collaborator injectable makes the app easy to test.
    Raises StoreIOError when the store file exists but cannot be read.
    """
    if settings is None:
        settings = get_settings()
    if category is None:
        category = settings.default_category
    if repo is None:
        repo = JsonTaskRepository(settings.data_dir)

    store = repo.load(category)
    return AppState(
        settings=settings,
        category=category,
        repo=repo,
        store=store,
        clock=clock or time.time,
        confirmer=confirmer or ConsoleConfirmer(),
    )


def save_state(state: AppState) -> None:
    """Write the whole store back to its category file (always a full overwrite)."""
    state.repo.save(state.category, state.store)
