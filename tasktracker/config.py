from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def load_env(base: Path | None = None) -> None:
    """Load ``.env`` then ``.env.<APP_ENV>`` from the working directory.

    Relative paths in settings (database, logs) resolve against the same
    directory.
    """
    base = base or Path.cwd()
    env_path = base / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    env_name = os.getenv("APP_ENV", "development")
    env_specific = base / f".env.{env_name}"
    if env_specific.exists():
        load_dotenv(env_specific, override=True)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    database_path: str = "tasks.db"
    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_grace_sec: int = 5
    log_level: str = "INFO"
    log_dir: str = "logs"


load_env()

SETTINGS = Settings(
    database_path=os.getenv("DATABASE_PATH", "").strip() or "tasks.db",
    host=os.getenv("HOST", "").strip() or "0.0.0.0",
    port=_env_int("PORT", 8080),
    shutdown_grace_sec=_env_int("SHUTDOWN_GRACE_SEC", 5),
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
)
