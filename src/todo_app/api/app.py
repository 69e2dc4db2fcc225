# src/todo_app/api/app.py

"""
FastAPI application factory.

The task repository is injected through AppState and kept on app.state, so
handlers never reach for a module-level connection.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.errors import StorageError, TodoError
from ..core.state import AppState
from . import health, routes

logger = logging.getLogger(__name__)


def _error_response(message: str) -> JSONResponse:
    # Client and server faults share the same shape and status.
    return JSONResponse(status_code=400, content={"error": message})


async def _handle_todo_error(request: Request, exc: TodoError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.warning("Storage error on %s %s: %s", request.method, request.url.path, exc)
    else:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return _error_response(str(exc))


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = str(err.get("msg", "invalid value"))
        parts.append(f"{loc}: {msg}" if loc else msg)
    message = "; ".join(parts) or "Invalid request"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return _error_response(message)


def create_app(state: AppState) -> FastAPI:
    settings = state.settings

    app = FastAPI(
        title=f"{getattr(settings, 'app_name', 'todo')} API",
        version=__version__,
    )
    app.state.app_state = state
    app.state.task_store = state.task_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(getattr(settings, "cors_origins", ["*"])),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoError, _handle_todo_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)

    app.include_router(routes.router)
    app.include_router(health.router)

    return app
