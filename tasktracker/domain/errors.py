from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for every error the service raises on purpose."""


class StorageError(TaskTrackerError):
    """The backing store failed; callers see a generic server error."""


class StorageUnavailable(StorageError):
    pass


class ReadError(StorageError):
    pass


class WriteError(StorageError):
    pass


class NotFound(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


class ValidationError(TaskTrackerError):
    """Client input was missing or malformed. The message is safe to show."""
