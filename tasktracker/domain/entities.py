from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from .enums import TaskStatus


def _isoformat(value: Optional[datetime]) -> str | None:
    # Stored timestamps are naive UTC.
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


@dataclass(frozen=True)
class TaskEntity:
    id: int
    title: str
    description: str
    status: TaskStatus
    created_at: datetime
    completed_at: Optional[datetime]
    deadline: Optional[datetime]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "created_at": _isoformat(self.created_at),
            "completed_at": _isoformat(self.completed_at),
            "deadline": _isoformat(self.deadline),
        }
