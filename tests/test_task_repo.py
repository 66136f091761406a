# tests/test_task_repo.py

from __future__ import annotations

import json
from datetime import date, time
from pathlib import Path

import pytest

from todo_companion.tasks.task_repo import InMemoryTaskRepo


@pytest.mark.asyncio
async def test_create_fetch_update_delete(make_task) -> None:
    repo = InMemoryTaskRepo()

    doc_id = await repo.create_task(make_task(title="Write report"))
    assert doc_id and len(repo) == 1

    fetched = await repo.fetch_tasks("u1")
    assert [(t.id, t.title, t.completed) for t in fetched] == [(doc_id, "Write report", False)]

    await repo.update_completed(doc_id, True)
    again = await repo.fetch_tasks("u1")
    assert again[0].completed is True
    # Reads are decoded copies, not the stored documents.
    assert fetched[0].completed is False

    await repo.delete_task(doc_id)
    assert await repo.fetch_tasks("u1") == []


@pytest.mark.asyncio
async def test_unknown_ids_raise_key_error() -> None:
    repo = InMemoryTaskRepo()
    with pytest.raises(KeyError):
        await repo.update_completed("nope", True)
    with pytest.raises(KeyError):
        await repo.delete_task("nope")


@pytest.mark.asyncio
async def test_from_json_seed(tmp_path: Path) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps(
            [
                {"id": "t1", "title": "Pay rent", "date": "2025-07-01", "timeHour": 8, "userId": "u1"},
                {"title": "Gym", "date": "2025-07-02", "timeHour": 18, "timeMinute": 30, "userId": "u1"},
                {"id": "t3", "title": "Other", "date": "2025-07-01", "userId": "u2"},
            ]
        ),
        "utf-8",
    )

    repo = InMemoryTaskRepo.from_json(seed)
    tasks = await repo.fetch_tasks("u1")

    assert len(repo) == 3
    assert [t.title for t in tasks] == ["Pay rent", "Gym"]
    assert tasks[0].id == "t1"
    assert tasks[1].id  # generated
    assert (tasks[1].due_date, tasks[1].due_time) == (date(2025, 7, 2), time(18, 30))


def test_from_json_rejects_bad_seed(tmp_path: Path) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"not": "a list"}), "utf-8")
    with pytest.raises(ValueError):
        InMemoryTaskRepo.from_json(seed)

    seed.write_text(json.dumps([{"id": "x", "title": "", "date": "2025-07-01", "userId": "u1"}]), "utf-8")
    with pytest.raises(ValueError):
        InMemoryTaskRepo.from_json(seed)
