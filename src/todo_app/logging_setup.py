# src/todo_app/logging_setup.py

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# uvicorn.access logs every request at INFO; the server console hides it by default.
DEFAULT_ACCESS_LEVEL = logging.WARNING


def _level(name: str | int | None, default: int) -> int:
    if isinstance(name, int):
        return name
    if not name:
        return default
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def log_file_name(app_name: str) -> str:
    """`My Todo` -> `my-todo.log`; falls back to `todo.log`."""
    slug = re.sub(r"[^a-z0-9]+", "-", app_name.lower()).strip("-")
    return f"{slug or 'todo'}.log"


class _ConsoleFilter(logging.Filter):
    """
    Console routing per logger family:
    - todo_app.*      handler level
    - uvicorn.access  access_level (request lines)
    - uvicorn.*       handler level (startup/shutdown, bind errors)
    - anything else   ERROR+ only
    """

    def __init__(self, access_level: int) -> None:
        super().__init__()
        self.access_level = access_level

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith("todo_app."):
            return True
        if name == "uvicorn.access":
            return record.levelno >= self.access_level
        if name == "uvicorn" or name.startswith("uvicorn."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    settings,
    *,
    access_level: int | None = None,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install console + file handlers on the root logger from app settings.

    Uses settings.log_level for the console, settings.access_log_level for
    uvicorn request lines, settings.data_dir for the log directory and
    settings.app_name for the file name. Returns the log file
    path. Safe to call again: previous handlers are replaced.
    """
    console_level = _level(getattr(settings, "log_level", None), logging.INFO)
    if access_level is None:
        access_level = _level(getattr(settings, "access_log_level", None), DEFAULT_ACCESS_LEVEL)
    log_dir = Path(getattr(settings, "data_dir", ".local/todo"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / log_file_name(str(getattr(settings, "app_name", "todo")))

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleFilter(access_level))
    root.addHandler(console)

    # The file keeps request lines too.
    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return log_file
