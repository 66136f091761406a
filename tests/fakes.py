# tests/fakes.py

from __future__ import annotations

from todo_companion.tasks.task_models import Task
from todo_companion.tasks.task_repo import InMemoryTaskRepo


class RecordingTaskRepo(InMemoryTaskRepo):
    """
    InMemoryTaskRepo that records every port call for assertions.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, object]] = []

    async def fetch_tasks(self, owner_id: str) -> list[Task]:
        self.calls.append(("fetch", owner_id))
        return await super().fetch_tasks(owner_id)

    async def create_task(self, task: Task) -> str:
        self.calls.append(("create", task.title))
        return await super().create_task(task)

    async def update_completed(self, task_id: str, completed: bool) -> None:
        self.calls.append(("update", (task_id, completed)))
        await super().update_completed(task_id, completed)

    async def delete_task(self, task_id: str) -> None:
        self.calls.append(("delete", task_id))
        await super().delete_task(task_id)


class FailingTaskRepo:
    """
    TaskRepo whose every call fails, like a remote store that is unreachable.
    """

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or ConnectionError("backend unavailable")
        self.calls = 0

    async def _fail(self):
        self.calls += 1
        raise self.exc

    async def fetch_tasks(self, owner_id: str) -> list[Task]:
        return await self._fail()

    async def create_task(self, task: Task) -> str:
        return await self._fail()

    async def update_completed(self, task_id: str, completed: bool) -> None:
        await self._fail()

    async def delete_task(self, task_id: str) -> None:
        await self._fail()


class EagerFailingTaskRepo:
    """
    TaskRepo that fails while the call is made, before any awaitable exists.
    """

    def __init__(self) -> None:
        self.calls = 0

    def _fail(self):
        self.calls += 1
        raise RuntimeError("client not initialised")

    def fetch_tasks(self, owner_id: str):
        return self._fail()

    def create_task(self, task: Task):
        return self._fail()

    def update_completed(self, task_id: str, completed: bool):
        return self._fail()

    def delete_task(self, task_id: str):
        return self._fail()
