from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from tasktracker.config import SETTINGS, Settings

# Request lines come from the app's own middleware.
_UVICORN_LEVELS = {
    "uvicorn": None,
    "uvicorn.error": None,
    "uvicorn.access": logging.WARNING,
}


def resolve_log_dir(log_dir: str | Path, base: Path | None = None) -> Path:
    path = Path(log_dir).expanduser()
    if path.is_absolute():
        return path
    return (base or Path.cwd()) / path


def setup_logging(settings: Settings = SETTINGS) -> Path:
    log_dir = resolve_log_dir(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tasktracker.log"

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[file_handler, console_handler],
    )

    # uvicorn runs with log_config=None; route its loggers through the root handlers.
    for name, level in _UVICORN_LEVELS.items():
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        if level is not None:
            uvicorn_logger.setLevel(level)

    return log_file
