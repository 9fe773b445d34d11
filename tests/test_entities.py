from __future__ import annotations

from datetime import datetime

from tasktracker.domain.entities import TaskEntity
from tasktracker.domain.enums import TaskStatus


def test_timestamps_serialize_as_utc() -> None:
    task = TaskEntity(
        id=1,
        title="Buy milk",
        description="2%",
        status=TaskStatus.DONE,
        created_at=datetime(2026, 10, 19, 8, 0),
        completed_at=datetime(2026, 10, 19, 9, 30),
        deadline=None,
    )

    data = task.to_dict()

    assert data["created_at"] == "2026-10-19T08:00:00+00:00"
    assert data["completed_at"] == "2026-10-19T09:30:00+00:00"
    assert data["deadline"] is None
    assert data["status"] == "done"
