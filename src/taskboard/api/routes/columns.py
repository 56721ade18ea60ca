"""Column endpoints."""

from fastapi import APIRouter, status

from taskboard.api.dependencies import BoardStoreDep
from taskboard.api.models import APIResponse, BoardResponse, ColumnCreate, board_result

router = APIRouter(prefix="/columns", tags=["columns"])


@router.post(
    "",
    response_model=APIResponse[BoardResponse],
    status_code=status.HTTP_201_CREATED,
)
def add_column(column: ColumnCreate, store: BoardStoreDep) -> APIResponse[BoardResponse]:
    """Append a new, empty column."""
    board = store.add_column(column.title)
    return board_result(store, board)


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(column_id: str, store: BoardStoreDep) -> None:
    """Delete a column and all of its tasks."""
    store.delete_column(column_id)
