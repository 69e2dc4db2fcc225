# src/todo_app/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import cast

from ..client.board import TodoBoard
from ..client.view import TaskView

Confirm = Callable[[str], bool]
CommandHandler2 = Callable[[TodoBoard, list[str]], str]
CommandHandler3 = Callable[[TodoBoard, list[str], Confirm | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console front-end (/list, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def help_lines(self) -> list[str]:
        return [f"/{name} - {text}" for name, text in sorted(self._help.items())]

    def handle(self, board: TodoBoard, line: str, confirm: Confirm | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        if name == "help":
            return "\n".join(self.help_lines())

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        nparams = len(inspect.signature(handler).parameters)
        if nparams >= 3:
            return cast(CommandHandler3, handler)(board, args, confirm)
        return cast(CommandHandler2, handler)(board, args)


def format_rows(rows: Sequence[TaskView]) -> str:
    if not rows:
        return "No tasks yet."
    lines = []
    for r in rows:
        mark = "x" if r.completed else " "
        lines.append(f"[{mark}] #{r.id}  {r.text}  ({r.date_label})")
    return "\n".join(lines)


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def _with_error(board: TodoBoard, text: str) -> str:
    if board.last_error:
        return f"{text}\nError: {board.last_error}"
    return text


def cmd_list(board: TodoBoard, args: list[str]) -> str:
    return _with_error(board, format_rows(board.refresh()))


def cmd_add(board: TodoBoard, args: list[str]) -> str:
    if not board.add(" ".join(args)):
        return _with_error(board, "Usage: /add <text>")
    return format_rows(board.rows)


def cmd_toggle(board: TodoBoard, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None or board.row(task_id) is None:
        return "Usage: /toggle <id> (see /list)"
    board.toggle(task_id)
    return _with_error(board, format_rows(board.rows))


def cmd_edit(board: TodoBoard, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None or not board.start_edit(task_id):
        return "Usage: /edit <id> <text> (see /list)"
    text = " ".join(args[1:])
    board.commit_edit(text)
    if not text.strip() and not board.last_error:
        return "Edit discarded.\n" + format_rows(board.rows)
    return _with_error(board, format_rows(board.rows))


def cmd_delete(board: TodoBoard, args: list[str], confirm: Confirm | None) -> str:
    task_id = _parse_id(args)
    if task_id is None or not board.request_delete(task_id):
        return "Usage: /delete <id> (see /list)"

    row = board.row(task_id)
    label = f"#{task_id} {row.text}" if row else f"#{task_id}"
    if confirm is None or not confirm(f"Delete {label}?"):
        board.cancel_delete()
        return "Delete cancelled."

    board.confirm_delete()
    return _with_error(board, format_rows(board.rows))


registry = CommandRegistry()
registry.register("list", cmd_list, "show all tasks (newest first)", aliases=["ls"])
registry.register("add", cmd_add, "add a task: /add <text>")
registry.register("toggle", cmd_toggle, "switch a task between active and completed", aliases=["done"])
registry.register("edit", cmd_edit, "replace a task's text: /edit <id> <text>")
registry.register("delete", cmd_delete, "delete a task after confirmation", aliases=["rm"])
