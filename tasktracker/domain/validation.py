"""Input checks shared by every HTTP handler.

Each function takes the raw value as it arrived (form field or query string,
possibly ``None``) and either returns the normalized value or raises
:class:`ValidationError` with a short, client-facing reason.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .enums import TaskStatus
from .errors import ValidationError

# Largest value SQLite can store in an INTEGER column.
MAX_TASK_ID = 2**63 - 1


def validate_title(raw: Optional[str]) -> str:
    title = (raw or "").strip()
    if not title:
        raise ValidationError("title is required")
    return title


def validate_description(raw: Optional[str]) -> str:
    return raw or ""


def validate_status(raw: Optional[str]) -> TaskStatus:
    value = raw or ""
    try:
        return TaskStatus(value)
    except ValueError:
        allowed = ", ".join(status.value for status in TaskStatus)
        raise ValidationError(f"status must be one of: {allowed}") from None


def parse_task_id(raw: Optional[str]) -> int:
    value = (raw or "").strip()
    if not value.isdecimal():
        raise ValidationError("id must be a positive integer")
    if len(value.lstrip("0")) > len(str(MAX_TASK_ID)):
        raise ValidationError("id is out of range")
    task_id = int(value)
    if task_id <= 0:
        raise ValidationError("id must be a positive integer")
    if task_id > MAX_TASK_ID:
        raise ValidationError("id is out of range")
    return task_id


def parse_deadline(raw: Optional[str]) -> Optional[datetime]:
    value = (raw or "").strip()
    if not value:
        return None
    try:
        deadline = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError("deadline must be an ISO-8601 timestamp") from None
    # Stored timestamps are naive UTC.
    if deadline.tzinfo is not None:
        deadline = deadline.astimezone(timezone.utc).replace(tzinfo=None)
    return deadline
