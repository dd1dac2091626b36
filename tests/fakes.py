# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from tasktime.tasks.task_models import TaskCategory
from tasktime.tasks.task_store import TaskStore


@dataclass(slots=True)
class FakeClock:
    """Manually advanced clock; call it like time.time()."""

    now: float = 1_700_000_000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass(slots=True)
class FakeConfirmer:
    """
    Scripted Confirmer: returns the queued answers in order and records
    every question it was asked.
    """

    answers: list[bool] = field(default_factory=list)
    questions: list[str] = field(default_factory=list)

    def ask(self, question: str) -> bool:
        self.questions.append(question)
        return self.answers.pop(0)


class FakeTaskRepo:
    """
    In-memory TaskRepository.

    This avoids the filesystem so command tests are purely about the
    store/entity rules. Saved stores are kept by reference.
    """

    def __init__(self, stores: dict[TaskCategory, TaskStore] | None = None) -> None:
        self.stores: dict[TaskCategory, TaskStore] = dict(stores or {})
        self.saved: list[TaskCategory] = []

    def load(self, category: TaskCategory) -> TaskStore:
        return self.stores.setdefault(category, TaskStore())

    def save(self, category: TaskCategory, store: TaskStore) -> None:
        self.stores[category] = store
        self.saved.append(category)
