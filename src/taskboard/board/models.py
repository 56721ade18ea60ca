"""Value objects for the Board Store.

Boards are immutable: every mutation builds a new ``Board`` from new
``Column`` tuples, so two snapshots compare equal exactly when they hold the
same columns and tasks in the same order.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from taskboard.board.exceptions import (
    ColumnNotFoundError,
    TaskNotFoundError,
    ValidationError,
)


def generate_id(prefix: str) -> str:
    """Generate a new unique ID such as ``task-<uuid4>``."""
    return f"{prefix}-{uuid.uuid4()}"


def is_blank(text: str) -> bool:
    """True if text is empty once surrounding whitespace is stripped."""
    return text.strip() == ""


@dataclass(frozen=True)
class Task:
    """A single unit of work."""

    id: str
    content: str


@dataclass(frozen=True)
class Column:
    """A titled, ordered list of tasks."""

    id: str
    title: str
    tasks: tuple[Task, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.tasks, tuple):
            object.__setattr__(self, "tasks", tuple(self.tasks))

    def __len__(self) -> int:
        return len(self.tasks)

    def index_of(self, task_id: str) -> int:
        """Position of a task in this column.

        Raises:
            TaskNotFoundError: If the task is not in this column
        """
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(f"Task with id '{task_id}' not found in column '{self.id}'")

    def get_task(self, task_id: str) -> Task:
        """Get a task by ID.

        Raises:
            TaskNotFoundError: If the task is not in this column
        """
        return self.tasks[self.index_of(task_id)]

    def with_tasks(self, tasks: Iterable[Task]) -> Column:
        """Copy of this column holding the given tasks."""
        return replace(self, tasks=tuple(tasks))


@dataclass(frozen=True)
class Board:
    """Ordered mapping of column ID to column.

    Construction checks that column IDs and task IDs are non-blank and unique
    and that no title or task content is blank; violations raise ``ValidationError``.
    """

    columns: tuple[Column, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))
        self._check_invariants()

    def _check_invariants(self) -> None:
        column_ids: set[str] = set()
        task_ids: set[str] = set()
        for column in self.columns:
            if is_blank(column.id):
                raise ValidationError("Column id cannot be empty")
            if column.id in column_ids:
                raise ValidationError(f"Duplicate column id '{column.id}'")
            column_ids.add(column.id)
            if is_blank(column.title):
                raise ValidationError(f"Column '{column.id}' has an empty title")
            for task in column.tasks:
                if is_blank(task.id):
                    raise ValidationError(f"Task in column '{column.id}' has an empty id")
                if task.id in task_ids:
                    raise ValidationError(f"Duplicate task id '{task.id}'")
                task_ids.add(task.id)
                if is_blank(task.content):
                    raise ValidationError(f"Task '{task.id}' has empty content")

    # --- Mapping-style access ---

    def __getitem__(self, column_id: str) -> Column:
        for column in self.columns:
            if column.id == column_id:
                return column
        raise ColumnNotFoundError(f"Column with id '{column_id}' not found")

    def __contains__(self, column_id: object) -> bool:
        return any(column.id == column_id for column in self.columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def column_ids(self) -> list[str]:
        """Column IDs in display order."""
        return [column.id for column in self.columns]

    def task_ids(self) -> list[str]:
        """All task IDs, column by column, in display order."""
        return [task.id for column in self.columns for task in column.tasks]

    def find_task(self, task_id: str) -> tuple[str, int]:
        """Locate a task anywhere on the board.

        Returns:
            Tuple of (column_id, index)

        Raises:
            TaskNotFoundError: If no column holds the task
        """
        for column in self.columns:
            for index, task in enumerate(column.tasks):
                if task.id == task_id:
                    return column.id, index
        raise TaskNotFoundError(f"Task with id '{task_id}' not found")

    # --- Snapshot builders ---

    def _require(self, column_id: str) -> None:
        if column_id not in self:
            raise ColumnNotFoundError(f"Column with id '{column_id}' not found")

    def with_column(self, column: Column) -> Board:
        """New board with a column appended after the existing ones."""
        return Board(self.columns + (column,))

    def without_column(self, column_id: str) -> Board:
        """New board without the given column."""
        self._require(column_id)
        return Board(tuple(c for c in self.columns if c.id != column_id))

    def replace_columns(self, *updated: Column) -> Board:
        """New board with columns swapped in place by ID, keeping order."""
        by_id = {column.id: column for column in updated}
        for column_id in by_id:
            self._require(column_id)
        return Board(tuple(by_id.get(c.id, c) for c in self.columns))


def default_board() -> Board:
    """Board used when nothing has been persisted yet."""
    return Board(
        (
            Column(
                id="todo",
                title="To Do",
                tasks=(
                    Task(id="task-1", content="Start my chemistry assignment"),
                    Task(id="task-2", content="Finish up my mathmetics homework"),
                ),
            ),
            Column(
                id="inProgress",
                title="In Progress",
                tasks=(Task(id="task-3", content="Prepare for my history presentation"),),
            ),
            Column(
                id="done",
                title="Done",
                tasks=(Task(id="task-4", content="Complete my english homework"),),
            ),
        )
    )
