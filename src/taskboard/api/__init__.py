"""REST API for Taskboard."""

from taskboard.api.app import app, create_app
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    ColumnResponse,
    MoveRequest,
    TaskResponse,
)

__all__ = [
    "APIResponse",
    "BoardResponse",
    "ColumnResponse",
    "MoveRequest",
    "TaskResponse",
    "app",
    "create_app",
]
