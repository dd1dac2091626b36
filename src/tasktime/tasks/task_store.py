# src/tasktime/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from ..core.errors import AmbiguousNameError, NotFoundError, TaskBusyError
from ..core.ports import Confirmer
from .task_models import Task, TaskCategory

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection for one category.

    Ids are unique within the store. A new id is always max(id) + 1, so the id
    of a deleted highest task can be handed out again by a later invocation.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: dict[int, Task] = {}
        for task in tasks or ():
            if task.id in self._tasks:
                raise ValueError(f"duplicate task id {task.id}")
            self._tasks[task.id] = task

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())

    def tasks(self) -> list[Task]:
        """All tasks in ascending id order."""
        return [self._tasks[i] for i in sorted(self._tasks)]

    # ---- ids / lookup ----

    def allocate_id(self) -> int:
        return max(self._tasks, default=0) + 1

    def get(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def find_by_name(self, name: str) -> list[Task]:
        return [t for t in self.tasks() if t.name == name]

    def select(self, *, show_all: bool) -> list[Task]:
        return [t for t in self.tasks() if t.running or show_all]

    # ---- mutations ----

    def create(self, name: str, *, start: bool = False, now: float | None = None) -> Task:
        task = Task(id=self.allocate_id(), name=name)
        if start:
            task.start(now)
        self._tasks[task.id] = task
        logger.debug("Task created id=%s name=%r running=%s", task.id, name, task.running)
        return task

    def insert(self, task: Task) -> None:
        if task.id in self._tasks:
            raise ValueError(f"duplicate task id {task.id}")
        self._tasks[task.id] = task

    def remove_by_id(self, task_id: int) -> Task:
        task = self.get(task_id)
        del self._tasks[task_id]
        logger.debug("Task removed id=%s", task_id)
        return task

    def remove_by_name(self, name: str) -> Task:
        matches = self.find_by_name(name)
        if not matches:
            raise NotFoundError(name=name)
        if len(matches) > 1:
            raise AmbiguousNameError(name, [t.id for t in matches])
        return self.remove_by_id(matches[0].id)

    def archive(self, task_id: int, target: TaskStore) -> Task:
        """
        Move a stopped task into `target` under a fresh target-local id.

        Returns the archived copy. Nothing changes if the task is running.
        """
        task = self.get(task_id)
        if task.running:
            raise TaskBusyError(task_id, "archiving")
        archived = replace(task, id=target.allocate_id())
        target.insert(archived)
        del self._tasks[task_id]
        logger.debug("Task %s archived as %s", task_id, archived.id)
        return archived

    def clear(self, confirmer: Confirmer, category: TaskCategory | str) -> bool:
        question = f"Do you want to proceed clearing all {category} tasks? (Y/N)"
        if not confirmer.ask(question):
            logger.debug("Clear of %s tasks declined", category)
            return False
        count = len(self._tasks)
        self._tasks.clear()
        logger.info("Cleared %d %s tasks", count, category)
        return True
