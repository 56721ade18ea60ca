"""Move endpoints."""

from typing import Any

from fastapi import APIRouter, Body

from taskboard.api.dependencies import BoardStoreDep
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    MoveRequest,
    board_result,
    board_to_response,
)
from taskboard.board import MoveEvent, translate_drop

router = APIRouter(prefix="/moves", tags=["moves"])


@router.post("", response_model=APIResponse[BoardResponse])
def move_task(move: MoveRequest, store: BoardStoreDep) -> APIResponse[BoardResponse]:
    """Move a task within a column or to another column."""
    board = store.apply_move(
        MoveEvent(
            source_column_id=move.source_column_id,
            source_index=move.source_index,
            dest_column_id=move.dest_column_id,
            dest_index=move.dest_index,
        )
    )
    return board_result(store, board)


@router.post("/drop", response_model=APIResponse[BoardResponse])
def drop_task(
    store: BoardStoreDep, result: dict[str, Any] = Body(...)
) -> APIResponse[BoardResponse]:
    """Apply a raw drag-and-drop result.

    A drop outside any column (no destination) leaves the board unchanged.
    """
    event = translate_drop(result)
    if event is None:
        return APIResponse(data=board_to_response(store.board))
    board = store.apply_move(event)
    return board_result(store, board)
