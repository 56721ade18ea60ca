"""BoardStore - Main API for board mutations."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from taskboard.board.exceptions import (
    BoardError,
    EditNotStartedError,
    InvalidIndexError,
    ValidationError,
)
from taskboard.board.models import Board, Column, Task, default_board, generate_id, is_blank
from taskboard.board.persistence import BoardPersistence
from taskboard.logging import truncate_for_log
from taskboard.storage import MemoryStorage, StorageError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from taskboard.api.events import EventManager
    from taskboard.board.moves import MoveEvent
    from taskboard.storage import StorageAdapter

logger = logging.getLogger(__name__)


def _check_index(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIndexError(f"{name} must be an integer, got {value!r}")
    return value


class BoardStore:
    """Owns the current board snapshot and applies every mutation to it.

    Each mutation validates its arguments against the current snapshot,
    builds a complete new Board, and swaps it in with one assignment. A
    failed mutation raises and leaves the snapshot untouched. After each
    successful mutation the whole board is saved; save failures are logged
    and kept in ``last_save_error`` but never undo the in-memory change.
    """

    def __init__(
        self,
        storage: StorageAdapter | None = None,
        event_manager: EventManager | None = None,
    ) -> None:
        """Initialize the store from saved state, or from the default board.

        Args:
            storage: Byte store to load from and save to. Defaults to memory.
            event_manager: Receives notifications and board updates
        """
        self._persistence = BoardPersistence(storage if storage is not None else MemoryStorage())
        self.event_manager = event_manager
        self.last_save_error: StorageError | None = None
        self._editing: tuple[str, str] | None = None

        loaded = self._persistence.load()
        if loaded is None:
            logger.info("No saved board found, starting from default board")
            self._board = default_board()
            self._save()
        else:
            logger.info(
                "Loaded board with %d columns and %d tasks",
                len(loaded),
                len(loaded.task_ids()),
            )
            self._board = loaded

    def close(self) -> None:
        """Close the underlying storage."""
        self._persistence.close()

    @property
    def board(self) -> Board:
        """Current board snapshot."""
        return self._board

    # --- Internals ---

    def _notify(self, message: str, destructive: bool = False) -> None:
        if self.event_manager is not None:
            self.event_manager.emit_notification(message, destructive=destructive)

    def _save(self) -> None:
        try:
            self._persistence.save(self._board)
        except StorageError as e:
            self.last_save_error = e
            logger.warning("Failed to save board: %s", e)
            self._notify(f"Failed to save board: {e}", destructive=True)
        else:
            self.last_save_error = None

    def _commit(self, board: Board, message: str) -> Board:
        self._board = board
        self._save()
        self._notify(message)
        if self.event_manager is not None:
            self.event_manager.emit_board_updated(board)
        return board

    @contextmanager
    def _rejecting(self, operation: str) -> Iterator[None]:
        try:
            yield
        except BoardError as e:
            logger.debug("%s rejected: %s", operation, e)
            self._notify(str(e), destructive=True)
            raise

    # --- Reads ---

    def get_column(self, column_id: str) -> Column:
        """Get a column by ID.

        Raises:
            ColumnNotFoundError: If column doesn't exist
        """
        return self._board[column_id]

    def get_task(self, column_id: str, task_id: str) -> Task:
        """Get a task by column and task ID.

        Raises:
            ColumnNotFoundError: If column doesn't exist
            TaskNotFoundError: If task isn't in the column
        """
        return self._board[column_id].get_task(task_id)

    def find_task(self, task_id: str) -> tuple[str, int]:
        """Locate a task by ID. Returns (column_id, index)."""
        return self._board.find_task(task_id)

    def copy_task_content(self, column_id: str, task_id: str) -> str:
        """Content of a task, for handing to a clipboard. Changes nothing."""
        with self._rejecting("copy_task_content"):
            content = self.get_task(column_id, task_id).content
        self._notify("Task content copied to clipboard")
        return content

    # --- Column Operations ---

    def add_column(self, title: str) -> Board:
        """Append a new, empty column.

        Args:
            title: Column title, must not be blank

        Returns:
            The new board snapshot

        Raises:
            ValidationError: If title is blank
        """
        with self._rejecting("add_column"):
            if is_blank(title):
                raise ValidationError("Column title cannot be empty")
            column = Column(id=generate_id("column"), title=title)
            board = self._board.with_column(column)
        logger.info("Added column %s (%s)", column.id, truncate_for_log(title))
        return self._commit(board, f'New column "{title}" added')

    def delete_column(self, column_id: str) -> Board:
        """Delete a column together with all of its tasks.

        Raises:
            ColumnNotFoundError: If column doesn't exist
        """
        with self._rejecting("delete_column"):
            column = self._board[column_id]
            board = self._board.without_column(column_id)
        if self._editing is not None and self._editing[0] == column_id:
            self._editing = None
        logger.info("Deleted column %s with %d tasks", column_id, len(column))
        return self._commit(board, f'Column "{column.title}" deleted')

    # --- Task Operations ---

    def add_task(self, column_id: str, content: str) -> Board:
        """Append a new task to the end of a column.

        Raises:
            ColumnNotFoundError: If column doesn't exist
            ValidationError: If content is blank
        """
        with self._rejecting("add_task"):
            column = self._board[column_id]
            if is_blank(content):
                raise ValidationError("Task content cannot be empty")
            task = Task(id=generate_id("task"), content=content)
            board = self._board.replace_columns(column.with_tasks(column.tasks + (task,)))
        logger.info("Added task %s to %s: %s", task.id, column_id, truncate_for_log(content))
        return self._commit(board, f"New task added to {column.title}")

    def delete_task(self, column_id: str, task_id: str) -> Board:
        """Delete a task from a column.

        Raises:
            ColumnNotFoundError: If column doesn't exist
            TaskNotFoundError: If task isn't in the column
        """
        with self._rejecting("delete_task"):
            column = self._board[column_id]
            index = column.index_of(task_id)
            tasks = column.tasks[:index] + column.tasks[index + 1 :]
            board = self._board.replace_columns(column.with_tasks(tasks))
        if self._editing == (column_id, task_id):
            self._editing = None
        logger.info("Deleted task %s from %s", task_id, column_id)
        return self._commit(board, f"Task deleted from {column.title}")

    def _replace_content(self, column_id: str, task_id: str, new_content: str) -> Board:
        if is_blank(new_content):
            raise ValidationError("Task content cannot be empty")
        column = self._board[column_id]
        index = column.index_of(task_id)
        tasks = list(column.tasks)
        tasks[index] = Task(id=task_id, content=new_content)
        return self._board.replace_columns(column.with_tasks(tasks))

    def edit_task(self, column_id: str, task_id: str, new_content: str) -> Board:
        """Replace a task's content, keeping its ID and position.

        Raises:
            ValidationError: If new_content is blank
            ColumnNotFoundError: If column doesn't exist
            TaskNotFoundError: If task isn't in the column
        """
        with self._rejecting("edit_task"):
            board = self._replace_content(column_id, task_id, new_content)
        logger.info("Edited task %s: %s", task_id, truncate_for_log(new_content))
        return self._commit(board, "Task updated successfully")

    # --- Edit Sessions ---

    @property
    def editing(self) -> tuple[str, str] | None:
        """(column_id, task_id) of the task being edited, if any."""
        return self._editing

    def start_edit(self, column_id: str, task_id: str) -> str:
        """Begin editing a task, replacing any edit already in progress.

        Returns:
            The task's current content, to seed the draft
        """
        with self._rejecting("start_edit"):
            task = self.get_task(column_id, task_id)
        self._editing = (column_id, task_id)
        return task.content

    def commit_edit(self, new_content: str) -> Board:
        """Apply the draft to the task being edited and end the session.

        The session stays open if the content is rejected.

        Raises:
            EditNotStartedError: If no edit is in progress
            ValidationError: If new_content is blank
        """
        with self._rejecting("commit_edit"):
            if self._editing is None:
                raise EditNotStartedError("No task is being edited")
            column_id, task_id = self._editing
            board = self._replace_content(column_id, task_id, new_content)
        self._editing = None
        logger.info("Edited task %s: %s", task_id, truncate_for_log(new_content))
        return self._commit(board, "Task updated successfully")

    def cancel_edit(self) -> None:
        """Drop the edit in progress, if any, without changing the board."""
        self._editing = None
        self._notify("Task editing cancelled")

    # --- Moves ---

    def move_task(
        self,
        source_column_id: str,
        source_index: int,
        dest_column_id: str,
        dest_index: int,
    ) -> Board:
        """Move a task within a column or to another column.

        Within one column the task is taken out first and dest_index then
        counts positions in the shortened list. Across columns dest_index may
        be anything from 0 up to the destination's current length, the
        latter meaning "append". Moving a task onto its own position returns
        the current snapshot unchanged.

        Raises:
            ColumnNotFoundError: If either column doesn't exist
            InvalidIndexError: If either index is out of bounds
        """
        with self._rejecting("move_task"):
            source = self._board[source_column_id]
            dest = self._board[dest_column_id]
            same_column = source_column_id == dest_column_id

            source_index = _check_index(source_index, "source_index")
            dest_index = _check_index(dest_index, "dest_index")
            if not 0 <= source_index < len(source):
                raise InvalidIndexError(
                    f"source_index {source_index} out of range for column "
                    f"'{source_column_id}' with {len(source)} tasks"
                )
            dest_length = len(source) - 1 if same_column else len(dest)
            if not 0 <= dest_index <= dest_length:
                raise InvalidIndexError(
                    f"dest_index {dest_index} out of range 0..{dest_length} "
                    f"for column '{dest_column_id}'"
                )

            if same_column and source_index == dest_index:
                return self._board

            source_tasks = list(source.tasks)
            task = source_tasks.pop(source_index)
            if same_column:
                source_tasks.insert(dest_index, task)
                board = self._board.replace_columns(source.with_tasks(source_tasks))
                message = f"Task moved within {source.title}"
            else:
                dest_tasks = list(dest.tasks)
                dest_tasks.insert(dest_index, task)
                board = self._board.replace_columns(
                    source.with_tasks(source_tasks), dest.with_tasks(dest_tasks)
                )
                message = f"Task moved from {source.title} to {dest.title}"

        if self._editing is not None and self._editing[1] == task.id:
            self._editing = (dest_column_id, task.id)
        logger.info(
            "Moved task %s from %s[%d] to %s[%d]",
            task.id,
            source_column_id,
            source_index,
            dest_column_id,
            dest_index,
        )
        return self._commit(board, message)

    def apply_move(self, event: MoveEvent) -> Board:
        """Apply a MoveEvent produced by ``translate_drop``."""
        return self.move_task(
            event.source_column_id,
            event.source_index,
            event.dest_column_id,
            event.dest_index,
        )
