"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends

from taskboard.board import BoardStore

if TYPE_CHECKING:
    from taskboard.api.events import EventManager
    from taskboard.storage import StorageAdapter

# Global BoardStore instance (initialized on app startup)
_board_store: BoardStore | None = None


def init_board_store(
    storage: StorageAdapter | None = None,
    event_manager: EventManager | None = None,
) -> BoardStore:
    """Initialize the global BoardStore instance."""
    global _board_store  # noqa: PLW0603
    _board_store = BoardStore(storage=storage, event_manager=event_manager)
    return _board_store


def close_board_store() -> None:
    """Close the global BoardStore instance."""
    global _board_store  # noqa: PLW0603
    if _board_store is not None:
        _board_store.close()
        _board_store = None


def get_board_store() -> Generator[BoardStore, None, None]:
    """Dependency that provides the BoardStore instance."""
    if _board_store is None:
        raise RuntimeError("BoardStore not initialized. Call init_board_store() first.")
    yield _board_store


# Type alias for dependency injection
BoardStoreDep = Annotated[BoardStore, Depends(get_board_store)]

# Global EventManager instance
_event_manager: EventManager | None = None


def init_event_manager() -> EventManager:
    """Initialize the global EventManager instance."""
    from taskboard.api.events import EventManager as EM  # noqa: PLC0415

    global _event_manager  # noqa: PLW0603
    _event_manager = EM()
    return _event_manager


def close_event_manager() -> None:
    """Drop the global EventManager instance."""
    global _event_manager  # noqa: PLW0603
    _event_manager = None


def get_event_manager() -> Generator[EventManager, None, None]:
    """Dependency that provides the EventManager instance."""
    if _event_manager is None:
        raise RuntimeError("EventManager not initialized. Call init_event_manager() first.")
    yield _event_manager
