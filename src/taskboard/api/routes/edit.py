"""Edit session endpoints (start, commit, cancel)."""

from fastapi import APIRouter, status

from taskboard.api.dependencies import BoardStoreDep
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    EditCommit,
    EditResponse,
    EditStart,
    board_result,
)

router = APIRouter(prefix="/edit", tags=["edit"])


@router.get("", response_model=APIResponse[EditResponse])
def get_edit(store: BoardStoreDep) -> APIResponse[EditResponse]:
    """Get the edit session in progress; data is null when none is open."""
    if store.editing is None:
        return APIResponse(data=None)
    column_id, task_id = store.editing
    task = store.get_task(column_id, task_id)
    return APIResponse(
        data=EditResponse(column_id=column_id, task_id=task_id, content=task.content)
    )


@router.post("/start", response_model=APIResponse[EditResponse])
def start_edit(edit: EditStart, store: BoardStoreDep) -> APIResponse[EditResponse]:
    """Start editing a task. Returns the current content as the draft."""
    content = store.start_edit(edit.column_id, edit.task_id)
    return APIResponse(
        data=EditResponse(column_id=edit.column_id, task_id=edit.task_id, content=content)
    )


@router.post("/commit", response_model=APIResponse[BoardResponse])
def commit_edit(edit: EditCommit, store: BoardStoreDep) -> APIResponse[BoardResponse]:
    """Save the draft to the task being edited."""
    board = store.commit_edit(edit.content)
    return board_result(store, board)


@router.post("/cancel", status_code=status.HTTP_204_NO_CONTENT)
def cancel_edit(store: BoardStoreDep) -> None:
    """Abandon the edit in progress."""
    store.cancel_edit()
