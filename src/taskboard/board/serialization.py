"""JSON codec for board snapshots.

The persisted value is a JSON object mapping column ID to
``{"id", "title", "tasks": [{"id", "content"}, ...]}``; key order is column
display order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator
from pydantic import ValidationError as SchemaValidationError

from taskboard.board.exceptions import BoardDecodeError, ValidationError
from taskboard.board.models import Board, Column, Task


class TaskRecord(BaseModel):
    """Persisted form of a task."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class ColumnRecord(BaseModel):
    """Persisted form of a column."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    tasks: list[TaskRecord]


class BoardRecord(RootModel[dict[str, ColumnRecord]]):
    """Persisted form of a board: column ID -> column, in display order."""

    @model_validator(mode="after")
    def _keys_match_column_ids(self) -> BoardRecord:
        for key, column in self.root.items():
            if key != column.id:
                raise ValueError(f"Key '{key}' does not match column id '{column.id}'")
        return self


def board_to_record(board: Board) -> BoardRecord:
    """Convert a Board to its persisted schema."""
    return BoardRecord(
        {
            column.id: ColumnRecord(
                id=column.id,
                title=column.title,
                tasks=[TaskRecord(id=task.id, content=task.content) for task in column.tasks],
            )
            for column in board
        }
    )


def record_to_board(record: BoardRecord) -> Board:
    """Convert a validated record back to a Board.

    Raises:
        ValidationError: If the record breaks a board invariant
    """
    return Board(
        tuple(
            Column(
                id=column.id,
                title=column.title,
                tasks=tuple(Task(id=task.id, content=task.content) for task in column.tasks),
            )
            for column in record.root.values()
        )
    )


def serialize(board: Board) -> bytes:
    """Serialize a board snapshot to UTF-8 JSON bytes."""
    return board_to_record(board).model_dump_json().encode("utf-8")


def deserialize(data: bytes | str) -> Board:
    """Deserialize bytes produced by ``serialize``.

    Raises:
        BoardDecodeError: If the bytes are not valid JSON, do not match the
            schema, or describe a board that breaks an invariant
    """
    try:
        record = BoardRecord.model_validate_json(data)
    except SchemaValidationError as e:
        raise BoardDecodeError(f"Persisted board does not match schema: {e}") from e
    try:
        return record_to_board(record)
    except ValidationError as e:
        raise BoardDecodeError(f"Persisted board is inconsistent: {e}") from e
