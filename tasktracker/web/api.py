from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, Query, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response

from tasktracker.domain.errors import NotFound, StorageError, ValidationError
from tasktracker.services.task_service import TaskService

logger = logging.getLogger(__name__)

INDEX_PATH = Path(__file__).resolve().parent / "static" / "index.html"


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> Response:
        logger.info("rejected %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(NotFound)
    async def _not_found(request: Request, exc: NotFound) -> Response:
        logger.info("not found %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=404)

    @app.exception_handler(StorageError)
    async def _storage_error(request: Request, exc: StorageError) -> Response:
        logger.error("storage failure %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse("internal server error", status_code=500)


def create_app(service: TaskService) -> FastAPI:
    app = FastAPI(
        title="tasktracker",
        description="Minimal task-tracking API backed by SQLite",
        version="1.0.0",
    )
    _register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(
            "http method=%s path=%s status=%s",
            request.method,
            request.url.path,
            response.status_code,
        )
        return response

    @app.get("/", include_in_schema=False)
    def index() -> Response:
        if not INDEX_PATH.exists():
            return PlainTextResponse("index page not found", status_code=404)
        return FileResponse(INDEX_PATH, media_type="text/html")

    @app.get("/tasks")
    def list_tasks() -> Response:
        tasks = service.list_tasks()
        logger.info("listed tasks count=%d", len(tasks))
        return JSONResponse([task.to_dict() for task in tasks])

    @app.post("/tasks")
    def create_task(
        title: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        deadline: Optional[str] = Form(None),
    ) -> Response:
        task = service.create_task(title, description, deadline)
        logger.info("task created id=%s title=%r", task.id, task.title)
        return JSONResponse(
            {"id": task.id, "title": task.title, "message": "task created"},
            status_code=201,
        )

    @app.post("/tasks/update")
    def update_task(
        id: Optional[str] = Query(None),
        status: Optional[str] = Form(None),
    ) -> Response:
        task = service.update_status(id, status)
        logger.info("task updated id=%s status=%s", task.id, task.status.value)
        return PlainTextResponse(f"task {task.id} updated: status={task.status.value}")

    @app.delete("/tasks/delete")
    def delete_task(id: Optional[str] = Query(None)) -> Response:
        task_id = service.delete_task(id)
        logger.info("task deleted id=%s", task_id)
        return PlainTextResponse(f"task {task_id} deleted")

    return app
