from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from tasktracker.domain.entities import TaskEntity
from tasktracker.domain.enums import TaskStatus
from tasktracker.domain.errors import NotFound, ReadError, WriteError

from .db import Database
from .models import TaskModel, utcnow

logger = logging.getLogger(__name__)


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        description=model.description or "",
        status=TaskStatus(model.status),
        created_at=model.created_at,
        completed_at=model.completed_at,
        deadline=model.deadline,
    )


class TaskRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    def create_task(self, title: str, description: str) -> TaskEntity:
        return self._insert(title, description, None)

    def create_task_with_deadline(
        self, title: str, description: str, deadline: datetime
    ) -> TaskEntity:
        return self._insert(title, description, deadline)

    def list_tasks(self) -> list[TaskEntity]:
        try:
            with self._db.session() as session:
                stmt = select(TaskModel).order_by(
                    TaskModel.created_at.asc(),
                    TaskModel.id.asc(),
                )
                return [_to_entity(task) for task in session.scalars(stmt)]
        except (SQLAlchemyError, ValueError) as exc:
            logger.exception("failed to list tasks")
            raise ReadError("cannot read tasks") from exc

    def update_task(self, task_id: int, status: TaskStatus) -> TaskEntity:
        try:
            with self._db.session() as session:
                task = session.get(TaskModel, task_id)
                if task is None:
                    raise NotFound(task_id)

                if status == TaskStatus.DONE:
                    if task.status != TaskStatus.DONE.value or task.completed_at is None:
                        task.completed_at = utcnow()
                else:
                    task.completed_at = None
                task.status = status.value

                session.commit()
                session.refresh(task)
                return _to_entity(task)
        except (SQLAlchemyError, ValueError) as exc:
            logger.exception("failed to update task id=%s", task_id)
            raise WriteError(f"cannot update task {task_id}") from exc

    def delete_task(self, task_id: int) -> None:
        try:
            with self._db.session() as session:
                result = session.execute(delete(TaskModel).where(TaskModel.id == task_id))
                if result.rowcount == 0:
                    raise NotFound(task_id)
                session.commit()
        except SQLAlchemyError as exc:
            logger.exception("failed to delete task id=%s", task_id)
            raise WriteError(f"cannot delete task {task_id}") from exc

    def _insert(
        self, title: str, description: str, deadline: Optional[datetime]
    ) -> TaskEntity:
        try:
            with self._db.session() as session:
                task = TaskModel(
                    title=title,
                    description=description,
                    status=TaskStatus.PENDING.value,
                    created_at=utcnow(),
                    deadline=deadline,
                )
                session.add(task)
                session.commit()
                session.refresh(task)
                return _to_entity(task)
        except SQLAlchemyError as exc:
            logger.exception("failed to create task title=%r", title)
            raise WriteError("cannot create task") from exc
