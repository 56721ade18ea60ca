"""Unit tests for board value objects."""

import pytest

from taskboard.board import (
    Board,
    Column,
    ColumnNotFoundError,
    Task,
    TaskNotFoundError,
    ValidationError,
    default_board,
)
from taskboard.board.models import generate_id


@pytest.mark.unit
class TestTask:
    """Tests for Task."""

    def test_tasks_compare_by_value(self) -> None:
        assert Task(id="t1", content="a") == Task(id="t1", content="a")
        assert Task(id="t1", content="a") != Task(id="t1", content="b")

    def test_task_is_immutable(self) -> None:
        task = Task(id="t1", content="a")

        with pytest.raises(AttributeError):
            task.content = "b"  # type: ignore[misc]


@pytest.mark.unit
class TestColumn:
    """Tests for Column."""

    def test_tasks_list_converted_to_tuple(self) -> None:
        column = Column(id="c", title="C", tasks=[Task(id="t1", content="a")])

        assert column.tasks == (Task(id="t1", content="a"),)

    def test_index_of(self) -> None:
        column = Column(
            id="c", title="C", tasks=(Task(id="t1", content="a"), Task(id="t2", content="b"))
        )

        assert column.index_of("t2") == 1

    def test_index_of_missing_raises(self) -> None:
        column = Column(id="c", title="C")

        with pytest.raises(TaskNotFoundError) as exc_info:
            column.index_of("missing")

        assert "missing" in str(exc_info.value)

    def test_with_tasks_leaves_original(self) -> None:
        column = Column(id="c", title="C")
        updated = column.with_tasks([Task(id="t1", content="a")])

        assert column.tasks == ()
        assert len(updated) == 1
        assert updated.id == "c"
        assert updated.title == "C"


@pytest.mark.unit
class TestBoardInvariants:
    """Construction rejects boards that break an invariant."""

    def test_empty_board_is_valid(self) -> None:
        board = Board()

        assert len(board) == 0
        assert board.column_ids == []

    def test_duplicate_column_ids_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate column id"):
            Board((Column(id="c", title="A"), Column(id="c", title="B")))

    def test_duplicate_task_ids_in_one_column_rejected(self) -> None:
        task = Task(id="t1", content="a")

        with pytest.raises(ValidationError, match="Duplicate task id"):
            Board((Column(id="c", title="A", tasks=(task, task)),))

    def test_duplicate_task_ids_across_columns_rejected(self) -> None:
        task = Task(id="t1", content="a")

        with pytest.raises(ValidationError, match="Duplicate task id"):
            Board(
                (
                    Column(id="a", title="A", tasks=(task,)),
                    Column(id="b", title="B", tasks=(task,)),
                )
            )

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Board((Column(id="c", title="   "),))

    def test_blank_content_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Board((Column(id="c", title="C", tasks=(Task(id="t1", content="\t"),)),))

    def test_empty_column_id_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Column id cannot be empty"):
            Board((Column(id="", title="x"),))

    def test_empty_task_id_rejected(self) -> None:
        with pytest.raises(ValidationError, match="empty id"):
            Board((Column(id="c", title="C", tasks=(Task(id="", content="x"),)),))


@pytest.mark.unit
class TestBoardAccess:
    """Mapping-style access on Board."""

    def test_getitem(self) -> None:
        board = default_board()

        assert board["inProgress"].title == "In Progress"

    def test_getitem_missing_raises(self) -> None:
        with pytest.raises(ColumnNotFoundError):
            default_board()["missing"]

    def test_contains(self) -> None:
        board = default_board()

        assert "todo" in board
        assert "missing" not in board

    def test_find_task(self) -> None:
        assert default_board().find_task("task-3") == ("inProgress", 0)

    def test_find_task_missing_raises(self) -> None:
        with pytest.raises(TaskNotFoundError):
            default_board().find_task("task-99")

    def test_replace_columns_keeps_order(self) -> None:
        board = default_board()
        updated = board.replace_columns(board["done"].with_tasks(()))

        assert updated.column_ids == ["todo", "inProgress", "done"]
        assert updated["done"].tasks == ()
        assert board["done"].tasks != ()

    def test_replace_unknown_column_raises(self) -> None:
        with pytest.raises(ColumnNotFoundError):
            default_board().replace_columns(Column(id="other", title="Other"))

    def test_without_column(self) -> None:
        board = default_board().without_column("inProgress")

        assert board.column_ids == ["todo", "done"]


@pytest.mark.unit
class TestDefaultBoard:
    """Tests for the default board."""

    def test_default_board_layout(self) -> None:
        board = default_board()

        assert board.column_ids == ["todo", "inProgress", "done"]
        assert [c.title for c in board] == ["To Do", "In Progress", "Done"]
        assert [t.id for t in board["todo"].tasks] == ["task-1", "task-2"]
        assert [t.id for t in board["inProgress"].tasks] == ["task-3"]
        assert [t.id for t in board["done"].tasks] == ["task-4"]

    def test_default_boards_are_equal(self) -> None:
        assert default_board() == default_board()


@pytest.mark.unit
def test_generate_id_is_unique_and_prefixed() -> None:
    ids = {generate_id("task") for _ in range(100)}

    assert len(ids) == 100
    assert all(i.startswith("task-") for i in ids)
