from __future__ import annotations

import contextlib
import logging
import signal
import sys
import threading
from collections.abc import Iterator

import uvicorn

from tasktracker.config import SETTINGS
from tasktracker.domain.errors import StorageUnavailable
from tasktracker.infra.db import Database
from tasktracker.infra.logging import setup_logging
from tasktracker.infra.repository import TaskRepository
from tasktracker.services.task_service import TaskService
from tasktracker.web.api import create_app

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class TaskServer(uvicorn.Server):
    """uvicorn server that treats SIGINT and SIGTERM as a clean shutdown.

    The stock server re-raises the captured signal once serving stops, which
    kills the process before storage is closed.
    """

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        previous = {sig: signal.signal(sig, self.handle_exit) for sig in SHUTDOWN_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)


def main() -> int:
    setup_logging()
    try:
        database = Database(SETTINGS.database_path)
    except StorageUnavailable as exc:
        logger.error("failed to open database: %s (%s)", exc, exc.__cause__)
        return 1

    try:
        app = create_app(TaskService(TaskRepository(database)))
        # In-flight requests get at most timeout_graceful_shutdown seconds.
        server = TaskServer(
            uvicorn.Config(
                app,
                host=SETTINGS.host,
                port=SETTINGS.port,
                timeout_graceful_shutdown=SETTINGS.shutdown_grace_sec,
                log_config=None,
            )
        )
        logger.info("server starting port=%s", SETTINGS.port)
        server.run()
        if not server.started:
            logger.error("server failed to start port=%s", SETTINGS.port)
            return 1
    finally:
        database.close()

    logger.info("server stopped cleanly")
    return 0


if __name__ == "__main__":
    sys.exit(main())
