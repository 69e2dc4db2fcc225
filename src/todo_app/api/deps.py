# src/todo_app/api/deps.py

from __future__ import annotations

from fastapi import Request

from ..core.ports import TaskRepo


def get_task_repo(request: Request) -> TaskRepo:
    """The repo injected by create_app(); overridable via app.dependency_overrides."""
    return request.app.state.task_store
