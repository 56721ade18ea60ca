"""Board read endpoint."""

from fastapi import APIRouter

from taskboard.api.dependencies import BoardStoreDep
from taskboard.api.models import APIResponse, BoardResponse, board_to_response

router = APIRouter(prefix="/board", tags=["board"])


@router.get("", response_model=APIResponse[BoardResponse])
def get_board(store: BoardStoreDep) -> APIResponse[BoardResponse]:
    """Get the current board, columns in display order."""
    return APIResponse(data=board_to_response(store.board))
