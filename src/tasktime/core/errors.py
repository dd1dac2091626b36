# src/tasktime/core/errors.py

"""
Exception hierarchy.

TaskError subclasses are business-rule violations: the CLI prints them and
still saves the store. StoreIOError is fatal and ends the process with a
non-zero status.
"""

from __future__ import annotations


class TaskTimeError(Exception):
    """Base class for all tasktime errors."""


class TaskError(TaskTimeError):
    """Recoverable error caused by a command that cannot be applied."""


class NotFoundError(TaskError):
    def __init__(self, task_id: int | None = None, *, name: str | None = None) -> None:
        self.task_id = task_id
        self.name = name
        if name is not None:
            msg = f"Task with name '{name}' does not exist"
        else:
            msg = f"Task with id {task_id} does not exist"
        super().__init__(msg)


class AmbiguousNameError(TaskError):
    def __init__(self, name: str, task_ids: list[int]) -> None:
        self.name = name
        self.task_ids = task_ids
        ids = ", ".join(str(i) for i in task_ids)
        super().__init__(
            f"{len(task_ids)} tasks are named '{name}' (ids: {ids}), delete by id instead"
        )


class AlreadyRunningError(TaskError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} is already running")


class NotRunningError(TaskError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} is not currently running")


class TaskBusyError(TaskError):
    def __init__(self, task_id: int, action: str) -> None:
        self.task_id = task_id
        self.action = action
        super().__init__(f"Task {task_id} is currently running, stop it before {action}.")


class InsufficientDurationError(TaskError):
    def __init__(self, task_id: int, requested: int, available: int) -> None:
        self.task_id = task_id
        self.requested = requested
        self.available = available
        super().__init__(f"Task {task_id} does not have enough time to subtract")


class InvalidFormatError(TaskError, ValueError):
    """Malformed time token or category name."""


class StoreIOError(TaskTimeError):
    """A store file could not be read, parsed or written."""

    def __init__(self, message: str, path: object | None = None) -> None:
        self.path = path
        super().__init__(message)
