# src/todo_app/api/routes.py

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path

from ..core.ports import TaskRepo
from ..tasks.task_models import TaskUpdate
from .deps import get_task_repo
from .schemas import CreateTaskRequest, UpdateTaskRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])

# SQLite INTEGER range; anything outside it cannot name a row.
TodoId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("")
def list_todos(repo: TaskRepo = Depends(get_task_repo)) -> dict[str, Any]:
    tasks = repo.list_tasks()
    return {"message": "success", "data": [t.to_dict() for t in tasks]}


@router.post("")
def create_todo(
    payload: CreateTaskRequest | None = None,
    repo: TaskRepo = Depends(get_task_repo),
) -> dict[str, Any]:
    text = payload.task if payload is not None else None
    task = repo.create_task(text)
    logger.info("Created task id=%s", task.id)
    return {"message": "success", "data": task.to_dict()}


@router.put("/{todo_id}")
def update_todo(
    todo_id: TodoId,
    payload: UpdateTaskRequest | None = None,
    repo: TaskRepo = Depends(get_task_repo),
) -> dict[str, Any]:
    update = payload.to_update() if payload is not None else TaskUpdate()
    changes = repo.update_task(todo_id, update)
    return {"message": "success", "changes": changes}


@router.delete("/{todo_id}")
def delete_todo(todo_id: TodoId, repo: TaskRepo = Depends(get_task_repo)) -> dict[str, Any]:
    changes = repo.delete_task(todo_id)
    return {"message": "deleted", "changes": changes}
