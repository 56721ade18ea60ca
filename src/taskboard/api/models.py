"""Pydantic models for REST API."""

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from taskboard.board import Board, BoardStore

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper.

    ``warning`` carries problems that did not fail the request, such as a
    board change that could not be saved.
    """

    data: T | None = None
    error: str | None = None
    warning: str | None = None


# Request models


class ColumnCreate(BaseModel):
    """Request model for adding a column."""

    title: str


class TaskCreate(BaseModel):
    """Request model for adding a task."""

    content: str


class TaskUpdate(BaseModel):
    """Request model for replacing a task's content."""

    content: str


class EditStart(BaseModel):
    """Request model for starting an edit session."""

    column_id: str
    task_id: str


class EditCommit(BaseModel):
    """Request model for committing an edit session."""

    content: str


class MoveRequest(BaseModel):
    """Request model for moving a task."""

    source_column_id: str
    source_index: int
    dest_column_id: str
    dest_index: int


# Response models


class TaskResponse(BaseModel):
    """Response model for a task."""

    id: str
    content: str


class ColumnResponse(BaseModel):
    """Response model for a column."""

    id: str
    title: str
    tasks: list[TaskResponse]


class BoardResponse(BaseModel):
    """Response model for a board, columns in display order."""

    columns: list[ColumnResponse]


class EditResponse(BaseModel):
    """Response model for the edit session in progress."""

    column_id: str
    task_id: str
    content: str


class TaskContentResponse(BaseModel):
    """Response model for copied task content."""

    content: str


def board_to_response(board: "Board") -> BoardResponse:
    """Convert a Board snapshot to BoardResponse."""
    return BoardResponse(
        columns=[
            ColumnResponse(
                id=column.id,
                title=column.title,
                tasks=[TaskResponse(id=t.id, content=t.content) for t in column.tasks],
            )
            for column in board
        ]
    )


def save_warning(store: "BoardStore") -> str | None:
    """Warning text for the last failed save, if the last save failed."""
    if store.last_save_error is None:
        return None
    return f"Board changed but could not be saved: {store.last_save_error}"


def board_result(store: "BoardStore", board: "Board") -> APIResponse[BoardResponse]:
    """Wrap a mutation result, attaching any save warning."""
    return APIResponse(data=board_to_response(board), warning=save_warning(store))
