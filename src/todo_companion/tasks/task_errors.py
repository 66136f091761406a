# src/todo_companion/tasks/task_errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task subsystem errors."""


class DuplicateIdError(TaskError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"duplicate task id: {task_id!r}")
        self.task_id = task_id


class NotFoundError(TaskError, KeyError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id!r}")
        self.task_id = task_id

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise.
        return str(self.args[0])


class TaskStoreError(TaskError):
    """A call to the persistence port failed; the original error is chained."""


class NotAuthenticatedError(TaskError):
    """No owner id is available for the current session."""
