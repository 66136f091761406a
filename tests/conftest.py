# tests/conftest.py

from __future__ import annotations

from datetime import date, time
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_companion.core.state import AppState
from todo_companion.tasks.task_models import Task
from todo_companion.tasks.task_repo import InMemoryTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        owner_id="u1",
        reload_after_add=False,
        data_dir=tmp_path / "data",
        seed_path=None,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return AppState(settings=settings, task_repo=InMemoryTaskRepo())


@pytest.fixture()
def make_task():
    """Factory with sensible defaults; override any field by keyword."""

    def _make(task_id: str = "", **overrides) -> Task:
        fields = dict(
            title=f"Task {task_id or 'new'}",
            due_date=date(2025, 6, 1),
            due_time=time(9, 0),
            owner_id="u1",
        )
        fields.update(overrides)
        return Task(id=task_id, **fields)

    return _make
