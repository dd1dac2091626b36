# src/tasktime/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Command handlers depend on these Protocols instead of the console, the wall
clock or the filesystem, so each can be swapped for a fake in tests.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import TaskCategory
    from ..tasks.task_store import TaskStore

Clock = Callable[[], float]
# Returns POSIX seconds, like time.time().


class Confirmer(Protocol):
    """Ask a yes/no question; True means the user agreed."""

    def ask(self, question: str) -> bool: ...


class TaskRepository(Protocol):
    """Loads and saves a whole TaskStore per category."""

    def load(self, category: TaskCategory) -> TaskStore: ...

    def save(self, category: TaskCategory, store: TaskStore) -> None: ...
