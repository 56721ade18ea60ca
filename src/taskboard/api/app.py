"""FastAPI application setup."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard import __version__
from taskboard.api.dependencies import (
    close_board_store,
    close_event_manager,
    init_board_store,
    init_event_manager,
)
from taskboard.api.models import APIResponse
from taskboard.api.routes import board, columns, edit, events, moves, tasks
from taskboard.board import (
    BoardError,
    EditNotStartedError,
    InvalidIndexError,
    NotFoundError,
    ValidationError,
)
from taskboard.storage import DEFAULT_QUOTA_BYTES, DEFAULT_STORAGE_KEY, SQLiteStorage

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "taskboard.db"


def _get_quota(value: int | None) -> int | None:
    """Storage quota in bytes from argument or TASKBOARD_STORAGE_QUOTA; 0 disables it."""
    if value is None:
        raw = os.environ.get("TASKBOARD_STORAGE_QUOTA")
        value = int(raw) if raw else DEFAULT_QUOTA_BYTES
    return value or None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    event_manager = init_event_manager()
    storage = SQLiteStorage(
        db_path=app.state.db_path,
        key=app.state.storage_key,
        quota_bytes=app.state.quota_bytes,
    )
    init_board_store(storage=storage, event_manager=event_manager)
    logger.info("Board store ready (db=%s, key=%s)", app.state.db_path, app.state.storage_key)

    yield
    # Shutdown
    close_board_store()
    close_event_manager()


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=str(exc)).model_dump(),
    )


def create_app(
    db_path: str | None = None,
    storage_key: str | None = None,
    quota_bytes: int | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite file holding the board, or ":memory:".
                 Defaults to TASKBOARD_DB_PATH or 'taskboard.db'.
        storage_key: Key the board is stored under.
                     Defaults to TASKBOARD_STORAGE_KEY or 'eLearningKanbanColumns'.
        quota_bytes: Largest saved board accepted, 0 for no limit.
                     Defaults to TASKBOARD_STORAGE_QUOTA or 5 MiB.
    """
    app = FastAPI(
        title="Taskboard API",
        description="REST API for Taskboard - columns of tasks with drag-and-drop ordering",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path or os.environ.get("TASKBOARD_DB_PATH", DEFAULT_DB_PATH)
    app.state.storage_key = storage_key or os.environ.get(
        "TASKBOARD_STORAGE_KEY", DEFAULT_STORAGE_KEY
    )
    app.state.quota_bytes = _get_quota(quota_bytes)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(board.router, prefix="/api/v1")
    app.include_router(columns.router, prefix="/api/v1")
    app.include_router(tasks.router, prefix="/api/v1")
    app.include_router(edit.router, prefix="/api/v1")
    app.include_router(moves.router, prefix="/api/v1")
    app.include_router(events.router, prefix="/api/v1")

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Map Board Store errors to HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(ValidationError)
    async def validation_handler(_request: Request, exc: ValidationError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(InvalidIndexError)
    async def invalid_index_handler(_request: Request, exc: InvalidIndexError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(EditNotStartedError)
    async def edit_not_started_handler(
        _request: Request, exc: EditNotStartedError
    ) -> JSONResponse:
        return _error_response(status.HTTP_409_CONFLICT, exc)

    @app.exception_handler(BoardError)
    async def board_error_handler(_request: Request, _exc: BoardError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )


def serve() -> None:
    """Run the API with uvicorn (console script ``taskboard-serve``)."""
    import uvicorn  # noqa: PLC0415

    from taskboard.logging import setup_logging  # noqa: PLC0415

    setup_logging()
    uvicorn.run(
        create_app(),
        host=os.environ.get("TASKBOARD_HOST", "127.0.0.1"),
        port=int(os.environ.get("TASKBOARD_PORT", "8000")),
        log_config=None,
    )


# Default app instance
app = create_app()
