"""Translation of drag-and-drop results into move instructions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from taskboard.board.exceptions import InvalidMoveEventError


@dataclass(frozen=True)
class MoveEvent:
    """Instruction to move the task at one position to another."""

    source_column_id: str
    source_index: int
    dest_column_id: str
    dest_index: int

    @property
    def is_noop(self) -> bool:
        """True if the task would land where it already is."""
        return (
            self.source_column_id == self.dest_column_id and self.source_index == self.dest_index
        )


def _location(result: Mapping[str, Any], key: str) -> tuple[str, int]:
    location = result.get(key)
    if not isinstance(location, Mapping):
        raise InvalidMoveEventError(f"Drop result has no '{key}' location")
    column_id = location.get("droppableId")
    index = location.get("index")
    if not isinstance(column_id, str) or not column_id:
        raise InvalidMoveEventError(f"Drop result '{key}' has no column id")
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidMoveEventError(f"Drop result '{key}' index must be an integer")
    return column_id, index


def translate_drop(result: Mapping[str, Any]) -> MoveEvent | None:
    """Turn a drag-and-drop result into a MoveEvent.

    The result has the shape ``{"source": {"droppableId", "index"},
    "destination": {"droppableId", "index"} | None}``. Indices are only
    checked for type here; bounds are checked when the move is applied.

    Returns:
        The MoveEvent, or None if the drop ended outside any column

    Raises:
        InvalidMoveEventError: If the result is malformed
    """
    if not isinstance(result, Mapping):
        raise InvalidMoveEventError("Drop result must be a mapping")
    source_column_id, source_index = _location(result, "source")
    if result.get("destination") is None:
        return None
    dest_column_id, dest_index = _location(result, "destination")
    return MoveEvent(
        source_column_id=source_column_id,
        source_index=source_index,
        dest_column_id=dest_column_id,
        dest_index=dest_index,
    )
