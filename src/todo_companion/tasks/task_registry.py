# src/todo_companion/tasks/task_registry.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_errors import DuplicateIdError, NotFoundError
from .task_models import Task


class _LocalKey:
    """Registry key for a task that has no persisted id yet."""

    __slots__ = ()


class TaskRegistry:
    """
    In-memory set of tasks for the current session.

    One authoritative map (id -> Task), kept in insertion order.
    Pending / completed / urgent are computed from it on every call,
    never stored.

    Not thread-safe: callers serialize mutations per instance.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str | _LocalKey, Task] = {}
        self.load(tasks)

    @staticmethod
    def _key_for(task: Task) -> str | _LocalKey:
        return task.id if task.id else _LocalKey()

    # ---- mutations ----

    def load(self, tasks: Iterable[Task]) -> None:
        fresh: dict[str | _LocalKey, Task] = {}
        for task in tasks:
            if self._holds(fresh, task):
                raise DuplicateIdError(task.id)
            fresh[self._key_for(task)] = task
        self._tasks = fresh

    def add(self, task: Task) -> None:
        if self._holds(self._tasks, task):
            raise DuplicateIdError(task.id)
        self._tasks[self._key_for(task)] = task

    @staticmethod
    def _holds(tasks: dict[str | _LocalKey, Task], task: Task) -> bool:
        # Unsaved tasks have no id to compare; the same object counts once.
        if task.id:
            return task.id in tasks
        return any(t is task for t in tasks.values())

    def set_completed(self, task_id: str, completed: bool) -> None:
        self.get(task_id).completed = bool(completed)

    def remove(self, task_id: str) -> None:
        if not task_id or task_id not in self._tasks:
            raise NotFoundError(task_id)
        del self._tasks[task_id]

    # ---- queries ----

    def get(self, task_id: str) -> Task:
        task = self._tasks.get(task_id) if task_id else None
        if task is None:
            raise NotFoundError(task_id)
        return task

    def all(self) -> list[Task]:
        return list(self._tasks.values())

    def pending(self) -> list[Task]:
        return [t for t in self._tasks.values() if not t.completed]

    def completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks.values() if t.completed]

    def urgent(self) -> Task | None:
        """
        Pending task with the earliest due instant.

        Strict "<" keeps the first-seen task on ties.
        """
        best: Task | None = None
        for task in self._tasks.values():
            if task.completed:
                continue
            if best is None or task.due_instant < best.due_instant:
                best = task
        return best

    def is_urgent(self, task_id: str) -> bool:
        top = self.urgent()
        return top is not None and bool(task_id) and top.id == task_id

    def counts(self) -> tuple[int, int]:
        """(pending, completed)"""
        done = sum(1 for t in self._tasks.values() if t.completed)
        return len(self._tasks) - done, done

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and bool(task_id) and task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self.all())
