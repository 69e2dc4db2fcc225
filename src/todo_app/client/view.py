# src/todo_app/client/view.py

"""
Pure rendering of a task list into view-models.

No I/O happens here: the board (or any front-end) fetches tasks and passes
them in; the result describes what each row should show.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, tzinfo

from ..tasks.task_models import Task, TaskStatus


@dataclass(frozen=True, slots=True)
class TaskView:
    id: int
    text: str
    status: TaskStatus
    completed: bool
    date_label: str
    css_classes: tuple[str, ...]
    # Status a click on the toggle button should send.
    toggle_status: TaskStatus


def format_date(ts: float, tz: tzinfo | None = None) -> str:
    return datetime.fromtimestamp(ts, tz=tz).strftime("%Y-%m-%d")


def render_task(task: Task, *, tz: tzinfo | None = None) -> TaskView:
    completed = task.status is TaskStatus.COMPLETED
    classes = ("task", "completed") if completed else ("task",)
    return TaskView(
        id=task.id,
        text=task.task,
        status=task.status,
        completed=completed,
        date_label=format_date(task.created_at, tz),
        css_classes=classes,
        toggle_status=task.status.toggled(),
    )


def render_tasks(tasks: Iterable[Task], *, tz: tzinfo | None = None) -> list[TaskView]:
    """Map tasks to rows, keeping the order the server returned."""
    return [render_task(t, tz=tz) for t in tasks]
