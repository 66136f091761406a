# src/todo_companion/tasks/task_service.py

from __future__ import annotations

"""
Task service.

The glue between the presentation layer, the remote task collection and the
in-memory registry:
- every mutation goes to the remote store first,
- the registry is only touched after the store call succeeded,
- store failures are logged and surfaced as TaskStoreError.

How failures are shown to the user (snackbars etc.) is up to the caller.
"""

import logging
from collections.abc import Awaitable, Callable
from datetime import date, time
from typing import TypeVar

from ..core.ports import TaskRepo
from .task_errors import NotAuthenticatedError, TaskStoreError
from .task_models import Task
from .task_registry import TaskRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskService:
    def __init__(
        self,
        repo: TaskRepo,
        registry: TaskRegistry | None = None,
        *,
        owner_id: str | None,
        reload_after_add: bool = False,
    ) -> None:
        self.repo = repo
        self.registry = registry if registry is not None else TaskRegistry()
        self.owner_id = owner_id
        self.reload_after_add = reload_after_add

    def _require_owner(self) -> str:
        if not self.owner_id:
            raise NotAuthenticatedError("User not authenticated")
        return self.owner_id

    async def _call(self, action: str, call: Callable[[], Awaitable[T]]) -> T:
        try:
            return await call()
        except Exception as exc:
            logger.exception("Task store call failed action=%s owner=%s", action, self.owner_id)
            raise TaskStoreError(f"{action} failed: {exc}") from exc

    # ---- operations ----

    async def refresh(self) -> list[Task]:
        """Replace the registry contents with the owner's tasks from the store."""
        owner_id = self._require_owner()
        tasks = await self._call("fetch", lambda: self.repo.fetch_tasks(owner_id))
        self.registry.load(tasks)
        logger.info("Tasks loaded owner=%s total=%d", owner_id, len(self.registry))
        return self.registry.all()

    async def add_task(self, *, title: str, due_date: date, due_time: time) -> Task:
        owner_id = self._require_owner()
        draft = Task(title=title.strip(), due_date=due_date, due_time=due_time, owner_id=owner_id)

        task_id = await self._call("create", lambda: self.repo.create_task(draft))
        if not task_id:
            raise TaskStoreError("create failed: store returned an empty id")

        if self.reload_after_add:
            await self.refresh()
            return self.registry.get(task_id)

        draft.id = task_id
        self.registry.add(draft)
        logger.debug("Task added id=%s due=%s", task_id, draft.due_instant.isoformat())
        return draft

    async def set_completed(self, task_id: str, completed: bool) -> Task:
        task = self.registry.get(task_id)
        await self._call("update", lambda: self.repo.update_completed(task_id, completed))
        self.registry.set_completed(task_id, completed)
        logger.debug("Task updated id=%s completed=%s", task_id, completed)
        return task

    async def toggle_completion(self, task_id: str) -> Task:
        return await self.set_completed(task_id, not self.registry.get(task_id).completed)

    async def delete_task(self, task_id: str) -> None:
        self.registry.get(task_id)
        await self._call("delete", lambda: self.repo.delete_task(task_id))
        self.registry.remove(task_id)
        logger.debug("Task deleted id=%s", task_id)

    # ---- views ----

    def pending(self) -> list[Task]:
        return self.registry.pending()

    def completed_tasks(self) -> list[Task]:
        return self.registry.completed_tasks()

    def urgent(self) -> Task | None:
        return self.registry.urgent()
