# src/todo_app/client/api_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.errors import TodoError
from ..tasks.task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class ApiError(TodoError):
    """The server answered with an error envelope or an unexpected status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TodoClient:
    """
    Thin HTTP client for the /todos API.

    Takes any httpx.Client (a FastAPI TestClient works too), so it carries no
    connection state of its own.
    """

    def __init__(self, http: httpx.Client, base_path: str = "/todos") -> None:
        self._http = http
        self._base_path = "/" + base_path.strip("/")

    @classmethod
    def connect(cls, base_url: str, *, timeout: float = 10.0) -> TodoClient:
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self._http.close()

    def _url(self, task_id: int | None = None) -> str:
        if task_id is None:
            return self._base_path
        return f"{self._base_path}/{int(task_id)}"

    @staticmethod
    def _envelope(resp: httpx.Response) -> dict[str, Any]:
        try:
            body = resp.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            raise ApiError(f"Unexpected response ({resp.status_code})", resp.status_code)
        if resp.status_code >= 400 or "error" in body:
            raise ApiError(str(body.get("error") or resp.reason_phrase), resp.status_code)
        return body

    def list_tasks(self) -> list[Task]:
        body = self._envelope(self._http.get(self._url()))
        return [Task.from_dict(item) for item in body.get("data") or []]

    def create_task(self, text: str) -> Task:
        body = self._envelope(self._http.post(self._url(), json={"task": text}))
        return Task.from_dict(body["data"])

    def update_task(
        self,
        task_id: int,
        *,
        task: str | None = None,
        status: TaskStatus | None = None,
    ) -> int:
        payload: dict[str, Any] = {}
        if task is not None:
            payload["task"] = task
        if status is not None:
            payload["status"] = TaskStatus(status).value
        body = self._envelope(self._http.put(self._url(task_id), json=payload))
        return int(body.get("changes", 0))

    def delete_task(self, task_id: int) -> int:
        body = self._envelope(self._http.delete(self._url(task_id)))
        return int(body.get("changes", 0))
