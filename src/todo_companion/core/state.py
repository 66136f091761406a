# src/todo_companion/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_registry import TaskRegistry
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: object

    task_repo: TaskRepo
    registry: TaskRegistry = field(default_factory=TaskRegistry)
