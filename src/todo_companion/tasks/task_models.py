# src/todo_companion/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - id is "" until the persistence layer assigns one.
    - due_date / due_time are naive local values; only their combination
      (due_instant) is ever compared.
    - completed is the only field mutated after creation.
    """

    title: str
    due_date: date
    due_time: time
    owner_id: str
    id: str = ""
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("title is required")
        if not self.owner_id:
            raise ValueError("owner_id is required")
        # Minute precision, like the time picker that produces it.
        self.due_time = self.due_time.replace(second=0, microsecond=0, tzinfo=None)

    def __setattr__(self, name: str, value: Any) -> None:
        # id may be filled in once (after create); owner_id never changes after init.
        if name in ("id", "owner_id"):
            current = getattr(self, name, "")
            if current and value != current:
                raise AttributeError(f"{name} is immutable once set")
        object.__setattr__(self, name, value)

    @property
    def due_instant(self) -> datetime:
        return datetime.combine(self.due_date, self.due_time)

    # ---- document codec ----

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "date": self.due_date.isoformat(),
            "timeHour": self.due_time.hour,
            "timeMinute": self.due_time.minute,
            "completed": self.completed,
            "userId": self.owner_id,
        }

    @classmethod
    def from_record(cls, doc_id: str, data: dict[str, Any]) -> Task:
        return cls(
            id=doc_id,
            title=str(data.get("title") or ""),
            due_date=_parse_date(data.get("date")),
            due_time=time(
                hour=int(data.get("timeHour") or 0),
                minute=int(data.get("timeMinute") or 0),
            ),
            completed=bool(data.get("completed", False)),
            owner_id=str(data.get("userId") or ""),
        )


def _parse_date(raw: Any) -> date:
    # Document stores may hand back timestamps instead of ISO strings.
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str) and raw.strip():
        return date.fromisoformat(raw.strip()[:10])
    raise ValueError(f"invalid date: {raw!r}")
