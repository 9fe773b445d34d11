from __future__ import annotations

from typing import Optional

from tasktracker.domain.entities import TaskEntity
from tasktracker.domain.validation import (
    parse_deadline,
    parse_task_id,
    validate_description,
    validate_status,
    validate_title,
)
from tasktracker.infra.repository import TaskRepository


class TaskService:
    """Validates raw client input and hands it to the repository.

    Nothing reaches storage unless every check has passed.
    """

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    def list_tasks(self) -> list[TaskEntity]:
        return self._repo.list_tasks()

    def create_task(
        self,
        title: Optional[str],
        description: Optional[str] = None,
        deadline: Optional[str] = None,
    ) -> TaskEntity:
        clean_title = validate_title(title)
        clean_description = validate_description(description)
        due = parse_deadline(deadline)
        if due is None:
            return self._repo.create_task(clean_title, clean_description)
        return self._repo.create_task_with_deadline(clean_title, clean_description, due)

    def update_status(self, task_id: Optional[str], status: Optional[str]) -> TaskEntity:
        clean_id = parse_task_id(task_id)
        new_status = validate_status(status)
        return self._repo.update_task(clean_id, new_status)

    def delete_task(self, task_id: Optional[str]) -> int:
        clean_id = parse_task_id(task_id)
        self._repo.delete_task(clean_id)
        return clean_id
