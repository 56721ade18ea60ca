"""Task endpoints."""

from fastapi import APIRouter, status

from taskboard.api.dependencies import BoardStoreDep
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    TaskContentResponse,
    TaskCreate,
    TaskUpdate,
    board_result,
)

router = APIRouter(prefix="/columns/{column_id}/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=APIResponse[BoardResponse],
    status_code=status.HTTP_201_CREATED,
)
def add_task(
    column_id: str, task: TaskCreate, store: BoardStoreDep
) -> APIResponse[BoardResponse]:
    """Append a task to a column."""
    board = store.add_task(column_id, task.content)
    return board_result(store, board)


@router.patch("/{task_id}", response_model=APIResponse[BoardResponse])
def edit_task(
    column_id: str, task_id: str, task: TaskUpdate, store: BoardStoreDep
) -> APIResponse[BoardResponse]:
    """Replace a task's content."""
    board = store.edit_task(column_id, task_id, task.content)
    return board_result(store, board)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(column_id: str, task_id: str, store: BoardStoreDep) -> None:
    """Delete a task."""
    store.delete_task(column_id, task_id)


@router.get("/{task_id}/content", response_model=APIResponse[TaskContentResponse])
def copy_task_content(
    column_id: str, task_id: str, store: BoardStoreDep
) -> APIResponse[TaskContentResponse]:
    """Get a task's content for copying to the clipboard."""
    content = store.copy_task_content(column_id, task_id)
    return APIResponse(data=TaskContentResponse(content=content))
