# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_app.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_ACCESS_LOG_LEVEL", "TODO_DATA_DIR", "TODO_DB_PATH", "TODO_PORT", "TODO_CORS_ORIGINS", "TODO_API_URL", "TODO_HOST"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.data_dir == Path(".local/todo")
    assert s.db_path == Path(".local/todo/todos.sqlite3")
    assert s.port == 3000
    assert s.cors_origins == ["*"]
    assert s.api_url == "http://127.0.0.1:3000"
    assert s.access_log_level == "WARNING"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TODO_DB_PATH", raising=False)
    monkeypatch.setenv("TODO_PORT", "not-a-number")
    monkeypatch.setenv("TODO_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("TODO_API_URL", "http://todo.test/")

    s = Settings.from_env()

    assert s.db_path == tmp_path / "todos.sqlite3"
    assert s.port == 3000
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.api_url == "http://todo.test"
