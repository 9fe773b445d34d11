from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tasktracker.infra.db import Database
from tasktracker.infra.repository import TaskRepository
from tasktracker.services.task_service import TaskService
from tasktracker.web.api import create_app


@pytest.fixture()
def database(tmp_path: Path):
    db = Database(tmp_path / "tasks.db")
    yield db
    db.close()


@pytest.fixture()
def repo(database: Database) -> TaskRepository:
    return TaskRepository(database)


@pytest.fixture()
def client(repo: TaskRepository) -> TestClient:
    return TestClient(create_app(TaskService(repo)))
