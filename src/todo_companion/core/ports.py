# src/todo_companion/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task service depends on a Protocol instead of a concrete document store.
This keeps the remote backend swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Awaitable, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Persistence-side port: the remote task collection.

    Implementations own ids: create_task returns the id the backend assigned.
    Errors are raised as-is; the service wraps them.
    """

    def fetch_tasks(self, owner_id: str) -> Awaitable[list[Task]]: ...

    def create_task(self, task: Task) -> Awaitable[str]: ...

    def update_completed(self, task_id: str, completed: bool) -> Awaitable[None]: ...

    def delete_task(self, task_id: str) -> Awaitable[None]: ...
