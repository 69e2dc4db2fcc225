# src/todo_app/cli/main.py

"""
CLI entrypoints.

- todo-server: initializes logging, opens the store, serves the API with uvicorn.
- todo-console: terminal client talking to a running server.
"""

from __future__ import annotations

import logging

import uvicorn

from ..api.app import create_app
from ..cli.bootstrap import create_board, create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import StorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    log_file = setup_logging(settings)

    logger.info("Starting %s (log file %s)...", settings.app_name, log_file)

    try:
        state = create_initial_state(settings=settings)
    except (StorageError, OSError):
        logger.exception("Storage initialization failed db=%s", settings.db_path)
        raise SystemExit(1) from None

    app = create_app(state)
    try:
        # log_config=None keeps uvicorn on our handlers.
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    finally:
        state.task_store.close()
        logger.info("Bye.")


def console_main() -> None:
    settings = get_settings()
    setup_logging(settings)

    board = create_board(settings=settings)
    try:
        run_console_loop(board)
    finally:
        board.client.close()


if __name__ == "__main__":
    main()
