# src/todo_app/core/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for errors raised by the todo app."""


class ValidationError(TodoError):
    """A required field is missing or has an unacceptable value."""


class StorageError(TodoError):
    """The persistence layer failed (including lost connectivity)."""
