# src/todo_app/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import format_rows
from ..cli.commands import registry as command_registry
from ..client.board import TodoBoard

logger = logging.getLogger(__name__)


def _ask_yes_no(question: str) -> bool:
    try:
        answer = input(f"{question} [y/N] ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return answer in {"y", "yes"}


def run_console_loop(
    board: TodoBoard,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    confirm: Callable[[str], bool] = _ask_yes_no,
) -> None:
    """
    Terminal front-end over the board.

    A line starting with "/" is a command; any other non-empty line adds a task.
    """
    logger.info("Console started.")
    write("Type a task to add it. Use /help for commands, /exit to quit.")
    write(format_rows(board.refresh()))

    while True:
        try:
            line = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = command_registry.handle(board, line, confirm=confirm)
        if reply is None:
            if board.add(line):
                reply = format_rows(board.rows)
            else:
                reply = f"Error: {board.last_error}" if board.last_error else ""

        if reply:
            write(reply)
