# src/tasktime/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_models import TaskCategory
from ..tasks.task_store import TaskStore
from .ports import Clock, Confirmer, TaskRepository


@dataclass
class AppState:
    """Everything a single command invocation works on."""

    settings: Settings
    category: TaskCategory
    repo: TaskRepository
    store: TaskStore
    clock: Clock
    confirmer: Confirmer

    def now(self) -> float:
        return self.clock()
