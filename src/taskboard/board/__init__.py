"""Board Store - ordered columns of tasks and the operations that change them."""

from taskboard.board.exceptions import (
    BoardDecodeError,
    BoardError,
    ColumnNotFoundError,
    EditNotStartedError,
    InvalidIndexError,
    InvalidMoveEventError,
    NotFoundError,
    TaskNotFoundError,
    ValidationError,
)
from taskboard.board.models import Board, Column, Task, default_board
from taskboard.board.moves import MoveEvent, translate_drop
from taskboard.board.persistence import BoardPersistence
from taskboard.board.serialization import deserialize, serialize
from taskboard.board.store import BoardStore

__all__ = [
    "Board",
    "BoardDecodeError",
    "BoardError",
    "BoardPersistence",
    "BoardStore",
    "Column",
    "ColumnNotFoundError",
    "EditNotStartedError",
    "InvalidIndexError",
    "InvalidMoveEventError",
    "MoveEvent",
    "NotFoundError",
    "Task",
    "TaskNotFoundError",
    "ValidationError",
    "default_board",
    "deserialize",
    "serialize",
    "translate_drop",
]
