# src/todo_app/api/schemas.py

from __future__ import annotations

from pydantic import BaseModel

from ..tasks.task_models import TaskStatus, TaskUpdate


class CreateTaskRequest(BaseModel):
    task: str | None = None


class UpdateTaskRequest(BaseModel):
    task: str | None = None
    status: TaskStatus | None = None

    def to_update(self) -> TaskUpdate:
        return TaskUpdate(task=self.task, status=self.status)
