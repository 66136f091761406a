# src/todo_companion/tasks/task_repo.py

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from .task_models import Task

logger = logging.getLogger(__name__)


class InMemoryTaskRepo:
    """
    In-process document collection implementing TaskRepo.

    Used for demos and local runs without a remote backend.

    Documents are stored in the same shape a remote document store would hold
    (Task.to_record()), and every read decodes a fresh Task, so callers never
    hold references into stored documents.
    """

    def __init__(self, documents: dict[str, dict[str, Any]] | None = None) -> None:
        self._docs: dict[str, dict[str, Any]] = dict(documents or {})

    @classmethod
    def from_json(cls, path: str | Path) -> InMemoryTaskRepo:
        """
        Seed from a JSON list of documents: [{"id": "...", "title": ..., ...}].

        Entries without an id get a generated one.
        """
        path = Path(path)
        raw = json.loads(path.read_text("utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"{path}: expected a JSON list of task documents")

        docs: dict[str, dict[str, Any]] = {}
        for item in raw:
            if not isinstance(item, dict):
                continue
            data = dict(item)
            doc_id = str(data.pop("id", "") or "") or cls._new_id()
            # Validate early so a bad seed fails at startup, not on first fetch.
            Task.from_record(doc_id, data)
            docs[doc_id] = data

        logger.info("InMemoryTaskRepo seeded path=%s total=%d", path, len(docs))
        return cls(docs)

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex[:20]

    # ---- TaskRepo ----

    async def fetch_tasks(self, owner_id: str) -> list[Task]:
        return [
            Task.from_record(doc_id, data)
            for doc_id, data in self._docs.items()
            if data.get("userId") == owner_id
        ]

    async def create_task(self, task: Task) -> str:
        doc_id = self._new_id()
        while doc_id in self._docs:
            doc_id = self._new_id()
        self._docs[doc_id] = task.to_record()
        logger.debug("Document created id=%s owner=%s", doc_id, task.owner_id)
        return doc_id

    async def update_completed(self, task_id: str, completed: bool) -> None:
        if task_id not in self._docs:
            raise KeyError(task_id)
        self._docs[task_id]["completed"] = bool(completed)
        logger.debug("Document updated id=%s completed=%s", task_id, completed)

    async def delete_task(self, task_id: str) -> None:
        if task_id not in self._docs:
            raise KeyError(task_id)
        del self._docs[task_id]
        logger.debug("Document deleted id=%s", task_id)

    def __len__(self) -> int:
        return len(self._docs)
