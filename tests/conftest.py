# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from todo_app.api.app import create_app
from todo_app.client.api_client import TodoClient
from todo_app.client.board import TodoBoard
from todo_app.core.state import AppState
from todo_app.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and create_app().

    A SimpleNamespace keeps tests independent from the process environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        access_log_level="WARNING",
        data_dir=tmp_path,
        db_path=tmp_path / "todos.sqlite3",
        host="127.0.0.1",
        port=3000,
        cors_origins=["*"],
        api_url="http://testserver",
        http_timeout_seconds=5.0,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.db_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def client(state: AppState) -> TestClient:
    return TestClient(create_app(state))


@pytest.fixture()
def board(client: TestClient) -> TodoBoard:
    """Board wired end-to-end: TodoClient -> TestClient -> FastAPI -> SQLite."""
    return TodoBoard(TodoClient(client))
