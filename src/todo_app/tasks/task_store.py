# src/todo_app/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..core.errors import StorageError, ValidationError
from .task_models import TASK_MAX_LENGTH, Task, TaskStatus, TaskUpdate

logger = logging.getLogger(__name__)


def _clean_text(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("Task content is required")
    text = raw.strip()
    if len(text) > TASK_MAX_LENGTH:
        raise ValidationError(f"Task content must be at most {TASK_MAX_LENGTH} characters")
    return text


def _clean_status(raw: Any) -> TaskStatus:
    try:
        return TaskStatus(raw)
    except ValueError:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise ValidationError(f"Invalid status {raw!r}; expected one of: {allowed}") from None


class TaskStore:
    """
    SQLite store for the single `todos` table.

    The table is created on construction if it does not exist yet, so
    starting against an existing database is a no-op.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "todos.sqlite3") -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create data directory for {self._db_path}: {exc}") from exc
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Shutdown hook (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database {self._db_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        except sqlite3.Error as exc:
            logger.error("SQLite error db=%s: %s", self._db_path, exc)
            raise StorageError(str(exc)) from exc
        except OverflowError as exc:
            # Parameter outside the SQLite INTEGER range.
            raise StorageError(str(exc)) from exc
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            with contextlib.suppress(sqlite3.Error):
                conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    task VARCHAR(255) NOT NULL,
                    status TEXT NOT NULL DEFAULT 'active'
                        CHECK (status IN ('active', 'completed')),
                    created_at REAL NOT NULL
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_todos_created ON todos(created_at)")
            conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            task=str(row["task"] or ""),
            status=TaskStatus.from_db(row["status"]),
            created_at=float(row["created_at"] or 0.0),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._connect() as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
            return int(n)

    def list_tasks(self) -> list[Task]:
        """All tasks, newest first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, task, status, created_at FROM todos ORDER BY created_at DESC, id DESC"
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

    def get_task(self, task_id: int) -> Task | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, task, status, created_at FROM todos WHERE id = ?",
                (int(task_id),),
            ).fetchone()
            return self._row_to_task(row) if row else None

    def create_task(self, text: Any) -> Task:
        clean = _clean_text(text)
        now = time.time()

        with self._connect() as conn:
            cur = conn.execute(
                "INSERT INTO todos(task, status, created_at) VALUES (?, ?, ?)",
                (clean, TaskStatus.ACTIVE.value, now),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise StorageError("SQLite did not return lastrowid for todos insert")

        task = Task(id=int(rowid), task=clean, status=TaskStatus.ACTIVE, created_at=now)
        logger.debug("Task created id=%s", task.id)
        return task

    def update_task(self, task_id: int, update: TaskUpdate) -> int:
        """
        Apply the fields present in `update` and return the number of rows changed.

        Rows whose values already equal the update are not counted, and a
        missing id is not an error: both report 0 changes.
        """
        match (update.task, update.status):
            case (None, None):
                raise ValidationError("No fields to update")
            case (text, None):
                sql = "UPDATE todos SET task = ? WHERE id = ? AND task IS NOT ?"
                clean = _clean_text(text)
                params: tuple[Any, ...] = (clean, int(task_id), clean)
            case (None, status):
                sql = "UPDATE todos SET status = ? WHERE id = ? AND status IS NOT ?"
                value = _clean_status(status).value
                params = (value, int(task_id), value)
            case (text, status):
                sql = (
                    "UPDATE todos SET task = ?, status = ? "
                    "WHERE id = ? AND (task IS NOT ? OR status IS NOT ?)"
                )
                clean, value = _clean_text(text), _clean_status(status).value
                params = (clean, value, int(task_id), clean, value)

        with self._connect() as conn:
            cur = conn.execute(sql, params)
            conn.commit()
            changes = int(cur.rowcount)

        logger.debug("Task updated id=%s changes=%s", task_id, changes)
        return changes

    def delete_task(self, task_id: int) -> int:
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM todos WHERE id = ?", (int(task_id),))
            conn.commit()
            changes = int(cur.rowcount)

        logger.debug("Task deleted id=%s changes=%s", task_id, changes)
        return changes
