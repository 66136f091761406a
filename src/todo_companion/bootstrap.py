# src/todo_companion/bootstrap.py

"""
Composition root.

- loads settings once,
- ensures local (gitignored) directories exist,
- wires a concrete task repository into AppState,
- builds the TaskService the presentation layer talks to.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.ports import TaskRepo
from .core.state import AppState
from .logging_setup import setup_logging
from .tasks.task_repo import InMemoryTaskRepo
from .tasks.task_service import TaskService

logger = logging.getLogger(__name__)


def init_logging(settings=None) -> None:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log_file = setup_logging(log_dir=getattr(settings, "data_dir", ".local/todo"), console_level=console_level)
    logger.info("Starting %s (log file %s)", getattr(settings, "app_name", "todo"), log_file)


def create_initial_state(*, settings=None, task_repo: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the repository injectable makes the app easier to test.
    Without a repository, an in-memory one is used (seeded from settings.seed_path if set).
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if task_repo is None:
        seed_path = getattr(settings, "seed_path", None)
        task_repo = InMemoryTaskRepo.from_json(seed_path) if seed_path else InMemoryTaskRepo()
        logger.info("No task repository configured; using in-memory store.")

    return AppState(settings=settings, task_repo=task_repo)


def create_task_service(state: AppState, *, owner_id: str | None = None) -> TaskService:
    """Service bound to owner_id, falling back to settings.owner_id (signed-in user)."""
    if owner_id is None:
        owner_id = getattr(state.settings, "owner_id", None)
    return TaskService(
        state.task_repo,
        state.registry,
        owner_id=owner_id,
        reload_after_add=bool(getattr(state.settings, "reload_after_add", False)),
    )
