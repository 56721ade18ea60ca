"""Board persistence on top of an opaque byte store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board.exceptions import BoardDecodeError
from taskboard.board.serialization import deserialize, serialize
from taskboard.storage import StorageError

if TYPE_CHECKING:
    from taskboard.board.models import Board
    from taskboard.storage import StorageAdapter

logger = logging.getLogger(__name__)


class BoardPersistence:
    """Loads and saves whole board snapshots through a StorageAdapter."""

    def __init__(self, storage: StorageAdapter) -> None:
        self.storage = storage

    def load(self) -> Board | None:
        """Load the saved board.

        Returns:
            The saved Board, or None when nothing usable is stored (absent,
            unreadable, malformed, or failing validation)
        """
        try:
            data = self.storage.load()
        except StorageError as e:
            logger.warning("Could not read saved board: %s", e)
            return None
        if data is None:
            return None
        try:
            return deserialize(data)
        except BoardDecodeError as e:
            logger.warning("Ignoring saved board (%d bytes): %s", len(data), e)
            return None

    def save(self, board: Board) -> None:
        """Serialize and store the full board.

        Raises:
            StorageError: If the underlying store rejects the write
        """
        self.storage.save(serialize(board))

    def close(self) -> None:
        """Close the underlying storage."""
        self.storage.close()
