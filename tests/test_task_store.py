# tests/test_task_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from todo_app.core.errors import StorageError, ValidationError
from todo_app.tasks.task_models import TaskStatus, TaskUpdate
from todo_app.tasks.task_store import TaskStore


def test_create_returns_active_task_with_fresh_id(store: TaskStore) -> None:
    first = store.create_task("Buy milk")
    second = store.create_task("  Walk the dog  ")

    assert first.id > 0
    assert second.id != first.id
    assert first.status is TaskStatus.ACTIVE
    assert second.task == "Walk the dog"
    assert first.created_at > 0

    stored = store.get_task(first.id)
    assert stored == first


@pytest.mark.parametrize("text", ["", "   ", "\t\n", None, 42])
def test_create_rejects_empty_text_and_adds_nothing(store: TaskStore, text) -> None:
    with pytest.raises(ValidationError):
        store.create_task(text)
    assert store.count_tasks() == 0


def test_create_rejects_text_over_column_limit(store: TaskStore) -> None:
    with pytest.raises(ValidationError):
        store.create_task("x" * 256)
    assert store.create_task("x" * 255).task == "x" * 255


def test_toggle_status_twice_restores_original(store: TaskStore) -> None:
    task = store.create_task("Read a book")

    assert store.update_task(task.id, TaskUpdate(status=TaskStatus.COMPLETED)) == 1
    assert store.get_task(task.id).status is TaskStatus.COMPLETED

    assert store.update_task(task.id, TaskUpdate(status=TaskStatus.ACTIVE)) == 1
    assert store.get_task(task.id).status is TaskStatus.ACTIVE


def test_text_update_leaves_status_and_created_at(store: TaskStore) -> None:
    task = store.create_task("Old text")
    store.update_task(task.id, TaskUpdate(status=TaskStatus.COMPLETED))

    assert store.update_task(task.id, TaskUpdate(task="New text")) == 1

    after = store.get_task(task.id)
    assert after.task == "New text"
    assert after.status is TaskStatus.COMPLETED
    assert after.created_at == task.created_at


def test_status_update_leaves_text(store: TaskStore) -> None:
    task = store.create_task("Keep me")
    store.update_task(task.id, TaskUpdate(status=TaskStatus.COMPLETED))
    assert store.get_task(task.id).task == "Keep me"


def test_update_both_fields(store: TaskStore) -> None:
    task = store.create_task("a")
    assert store.update_task(task.id, TaskUpdate(task="b", status=TaskStatus.COMPLETED)) == 1
    after = store.get_task(task.id)
    assert (after.task, after.status) == ("b", TaskStatus.COMPLETED)


def test_update_validation(store: TaskStore) -> None:
    task = store.create_task("a")

    with pytest.raises(ValidationError):
        store.update_task(task.id, TaskUpdate())
    with pytest.raises(ValidationError):
        store.update_task(task.id, TaskUpdate(task="   "))
    with pytest.raises(ValidationError):
        store.update_task(task.id, TaskUpdate(status="archived"))  # type: ignore[arg-type]

    assert store.get_task(task.id).task == "a"


def test_update_and_delete_missing_id_report_zero(store: TaskStore) -> None:
    assert store.update_task(999, TaskUpdate(task="nothing")) == 0
    assert store.delete_task(999) == 0


def test_list_after_creates_and_deletes_is_newest_first(store: TaskStore) -> None:
    created = [store.create_task(f"task {i}") for i in range(5)]
    assert store.delete_task(created[1].id) == 1
    assert store.delete_task(created[3].id) == 1

    tasks = store.list_tasks()

    assert len(tasks) == 3
    assert [t.id for t in tasks] == [created[4].id, created[2].id, created[0].id]
    stamps = [t.created_at for t in tasks]
    assert stamps == sorted(stamps, reverse=True)


def test_schema_init_is_idempotent(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "todos.sqlite3"
    first = TaskStore(db)
    first.create_task("survives restart")

    second = TaskStore(db)
    assert [t.task for t in second.list_tasks()] == ["survives restart"]


def test_unknown_stored_status_reads_as_active(store: TaskStore) -> None:
    task = store.create_task("legacy")
    conn = sqlite3.connect(str(store.db_path))
    try:
        conn.execute("PRAGMA ignore_check_constraints = ON")
        conn.execute("UPDATE todos SET status = 'weird' WHERE id = ?", (task.id,))
        conn.commit()
    finally:
        conn.close()

    assert store.get_task(task.id).status is TaskStatus.ACTIVE


def test_sqlite_failure_becomes_storage_error(store: TaskStore) -> None:
    conn = sqlite3.connect(str(store.db_path))
    try:
        conn.execute("DROP TABLE todos")
        conn.commit()
    finally:
        conn.close()

    with pytest.raises(StorageError):
        store.list_tasks()


def test_unreachable_path_is_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    with pytest.raises(StorageError):
        TaskStore(blocker / "todos.sqlite3")


def test_update_with_unchanged_values_reports_zero(store: TaskStore) -> None:
    task = store.create_task("same")

    assert store.update_task(task.id, TaskUpdate(task="  same  ")) == 0
    assert store.update_task(task.id, TaskUpdate(status=TaskStatus.ACTIVE)) == 0
    assert store.update_task(task.id, TaskUpdate(task="same", status=TaskStatus.ACTIVE)) == 0
    assert store.update_task(task.id, TaskUpdate(task="other", status=TaskStatus.ACTIVE)) == 1


def test_id_beyond_sqlite_range_is_storage_error(store: TaskStore) -> None:
    with pytest.raises(StorageError):
        store.delete_task(2**64)
    with pytest.raises(StorageError):
        store.update_task(2**64, TaskUpdate(status=TaskStatus.COMPLETED))
