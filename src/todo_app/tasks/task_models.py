# src/todo_app/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

TASK_MAX_LENGTH = 255


class TaskStatus(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.ACTIVE
        try:
            return cls(raw)
        except ValueError:
            return cls.ACTIVE

    def toggled(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self is TaskStatus.ACTIVE else TaskStatus.ACTIVE


@dataclass(slots=True)
class Task:
    id: int
    task: str
    status: TaskStatus
    created_at: float

    def to_dict(self) -> dict[str, Any]:
        """JSON shape used on the wire: created_at as ISO-8601 UTC."""
        return {
            "id": self.id,
            "task": self.task,
            "status": self.status.value,
            "created_at": datetime.fromtimestamp(self.created_at, tz=timezone.utc).isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        raw_ts = data.get("created_at")
        if isinstance(raw_ts, (int, float)):
            created_at = float(raw_ts)
        elif isinstance(raw_ts, str) and raw_ts:
            created_at = datetime.fromisoformat(raw_ts.replace("Z", "+00:00")).timestamp()
        else:
            created_at = 0.0
        return cls(
            id=int(data["id"]),
            task=str(data.get("task") or ""),
            status=TaskStatus.from_db(data.get("status")),
            created_at=created_at,
        )


@dataclass(frozen=True, slots=True)
class TaskUpdate:
    """
    Partial update of a task.

    A field left as None is not touched. At least one field must be present.
    """

    task: str | None = None
    status: TaskStatus | None = None

    def is_empty(self) -> bool:
        return self.task is None and self.status is None
