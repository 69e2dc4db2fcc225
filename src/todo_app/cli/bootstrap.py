# src/todo_app/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the concrete TaskStore into AppState,
- builds the console board from the same settings.
"""

from __future__ import annotations

import logging

from ..client.api_client import TodoClient
from ..client.board import TodoBoard
from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). Raises StorageError
    when the database cannot be opened or initialized.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.db_path),
    )


def create_board(*, settings=None) -> TodoBoard:
    if settings is None:
        settings = get_settings()
    client = TodoClient.connect(settings.api_url, timeout=settings.http_timeout_seconds)
    logger.info("Console client using %s", settings.api_url)
    return TodoBoard(client)
