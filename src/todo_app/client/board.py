# src/todo_app/client/board.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import tzinfo
from typing import TypeVar

import httpx

from .api_client import ApiError, TodoClient
from .view import TaskView, render_tasks

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TodoBoard:
    """
    Client-side controller for the task list.

    Every mutation is sent to the server and followed by a full refresh;
    rows are never patched locally.

    Two pieces of UI state live here:
    - editing_id: row currently in inline-edit mode
    - pending_delete_id: row waiting for delete confirmation
    """

    def __init__(self, client: TodoClient, *, tz: tzinfo | None = None) -> None:
        self.client = client
        self.tz = tz
        self.rows: list[TaskView] = []
        self.editing_id: int | None = None
        self.pending_delete_id: int | None = None
        self.last_error: str | None = None

    def _call(self, what: str, fn: Callable[[], T]) -> T | None:
        try:
            result = fn()
        except (ApiError, httpx.HTTPError) as exc:
            logger.warning("Error %s: %s", what, exc)
            self.last_error = str(exc)
            return None
        self.last_error = None
        return result

    def row(self, task_id: int) -> TaskView | None:
        for r in self.rows:
            if r.id == task_id:
                return r
        return None

    def refresh(self) -> list[TaskView]:
        """Fetch the full list and replace the rendered rows."""
        tasks = self._call("fetching todos", self.client.list_tasks)
        if tasks is not None:
            self.rows = render_tasks(tasks, tz=self.tz)
        return self.rows

    def add(self, text: str) -> bool:
        text = text.strip()
        if not text:
            return False
        created = self._call("adding todo", lambda: self.client.create_task(text))
        if created is None:
            return False
        self.refresh()
        return True

    def toggle(self, task_id: int) -> bool:
        current = self.row(task_id)
        if current is None:
            return False
        changes = self._call(
            "toggling status",
            lambda: self.client.update_task(task_id, status=current.toggle_status),
        )
        self.refresh()
        return bool(changes)

    # ---- inline edit ----

    def start_edit(self, task_id: int) -> bool:
        if self.editing_id is not None or self.row(task_id) is None:
            return False
        self.editing_id = task_id
        return True

    def commit_edit(self, text: str) -> bool:
        """
        Enter / focus-loss: save the edited text.

        An empty value discards the edit and restores the server's view.
        """
        task_id = self.editing_id
        self.editing_id = None
        if task_id is None:
            return False
        if not text.strip():
            self.refresh()
            return False
        changes = self._call(
            "updating todo", lambda: self.client.update_task(task_id, task=text)
        )
        self.refresh()
        return bool(changes)

    def cancel_edit(self) -> None:
        """Escape: drop the edit and re-fetch."""
        self.editing_id = None
        self.refresh()

    # ---- delete confirmation ----

    def request_delete(self, task_id: int) -> bool:
        if self.row(task_id) is None:
            return False
        self.pending_delete_id = task_id
        return True

    def confirm_delete(self) -> bool:
        task_id = self.pending_delete_id
        self.pending_delete_id = None
        if task_id is None:
            return False
        changes = self._call("deleting todo", lambda: self.client.delete_task(task_id))
        self.refresh()
        return bool(changes)

    def cancel_delete(self) -> None:
        self.pending_delete_id = None
