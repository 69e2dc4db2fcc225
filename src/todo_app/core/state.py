# src/todo_app/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass(slots=True)
class AppState:
    """Everything the server needs, wired once in the composition root."""

    # Settings object (config.Settings in production, SimpleNamespace in tests).
    settings: Any
    task_store: TaskRepo
