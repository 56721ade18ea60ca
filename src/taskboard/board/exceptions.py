"""Custom exceptions for the Board Store."""


class BoardError(Exception):
    """Base exception for Board Store errors."""


class ValidationError(BoardError):
    """Title or content is empty, or a board value breaks an invariant."""


class InvalidMoveEventError(ValidationError):
    """Drag-drop result is malformed and cannot be turned into a move."""


class NotFoundError(BoardError):
    """Referenced column or task does not exist."""


class ColumnNotFoundError(NotFoundError):
    """Column with given ID does not exist."""


class TaskNotFoundError(NotFoundError):
    """Task with given ID does not exist in the column."""


class InvalidIndexError(BoardError, IndexError):
    """Move position is outside the valid bounds for its column."""


class EditNotStartedError(BoardError):
    """Commit requested while no task is being edited."""


class BoardDecodeError(BoardError):
    """Persisted bytes cannot be turned into a valid board."""
