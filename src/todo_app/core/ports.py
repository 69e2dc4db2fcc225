# src/todo_app/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the API layer.

Handlers depend on the TaskRepo Protocol instead of the concrete SQLite store,
so tests can inject in-memory or failing repositories.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskUpdate


class TaskRepo(Protocol):
    def list_tasks(self) -> list[Task]: ...
    def create_task(self, text: str | None) -> Task: ...
    def update_task(self, task_id: int, update: TaskUpdate) -> int: ...
    def delete_task(self, task_id: int) -> int: ...
    def count_tasks(self) -> int: ...
    def close(self) -> None: ...
