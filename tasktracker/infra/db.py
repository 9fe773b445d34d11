from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from tasktracker.domain.errors import StorageUnavailable

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the single SQLite connection behind the task store.

    Every session is handed out under ``_lock`` and the pool holds exactly one
    connection, so storage access is serialized no matter how many request
    threads call in at once.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._engine = create_engine(
            f"sqlite:///{self.path}",
            poolclass=QueuePool,
            pool_size=1,
            max_overflow=0,
            pool_pre_ping=True,
            connect_args={"check_same_thread": False},
        )
        self._session_factory = sessionmaker(bind=self._engine, autoflush=False, autocommit=False)
        self._closed = False
        try:
            self._init_schema()
        except SQLAlchemyError as exc:
            self._engine.dispose()
            self._closed = True
            raise StorageUnavailable(f"cannot open database at {self.path}") from exc
        logger.info("database ready path=%s", self.path)

    def _init_schema(self) -> None:
        # Register the table on Base.metadata.
        from . import models  # noqa: F401

        with self._engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(self._engine)

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def session(self) -> Iterator[Session]:
        with self._lock:
            if self._closed:
                raise StorageUnavailable(f"database at {self.path} is closed")
            with self._session_factory() as session:
                yield session

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._engine.dispose()
            self._closed = True
        logger.info("database closed path=%s", self.path)
