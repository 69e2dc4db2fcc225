# src/todo_app/api/health.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from ..core.errors import StorageError
from ..core.ports import TaskRepo
from .deps import get_task_repo

router = APIRouter(tags=["health"])


def build_health_snapshot(repo: TaskRepo) -> dict[str, Any]:
    payload: dict[str, Any] = {"status": "healthy", "database": "connected"}
    try:
        payload["tasks"] = repo.count_tasks()
    except StorageError as exc:
        payload["status"] = "degraded"
        payload["database"] = "error"
        payload["error"] = str(exc)
    payload["timestamp"] = datetime.now(timezone.utc).isoformat()
    return payload


@router.get("/health")
def health_check(repo: TaskRepo = Depends(get_task_repo)) -> dict[str, Any]:
    return build_health_snapshot(repo)
