"""Unit tests for BoardStore edit sessions."""

import pytest

from taskboard.board import (
    BoardStore,
    EditNotStartedError,
    TaskNotFoundError,
    ValidationError,
)


@pytest.mark.unit
class TestStartEdit:
    """Tests for start_edit."""

    def test_start_edit_returns_current_content(self, store: BoardStore) -> None:
        draft = store.start_edit("todo", "task-2")

        assert draft == "Finish up my mathmetics homework"
        assert store.editing == ("todo", "task-2")

    def test_start_edit_does_not_change_board(self, store: BoardStore) -> None:
        before = store.board

        store.start_edit("todo", "task-2")

        assert store.board is before

    def test_start_edit_replaces_previous_session(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")
        store.start_edit("done", "task-4")

        assert store.editing == ("done", "task-4")

    def test_start_edit_missing_task_raises(self, store: BoardStore) -> None:
        with pytest.raises(TaskNotFoundError):
            store.start_edit("todo", "task-4")

        assert store.editing is None


@pytest.mark.unit
class TestCommitEdit:
    """Tests for commit_edit."""

    def test_commit_edit_saves_content(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")

        board = store.commit_edit("Start my biology assignment")

        assert board["todo"].tasks[0].content == "Start my biology assignment"
        assert store.editing is None

    def test_commit_without_session_raises(self, store: BoardStore) -> None:
        with pytest.raises(EditNotStartedError):
            store.commit_edit("Anything")

    def test_blank_commit_keeps_session_open(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")
        before = store.board

        with pytest.raises(ValidationError):
            store.commit_edit("   ")

        assert store.editing == ("todo", "task-1")
        assert store.board is before

    def test_commit_follows_moved_task(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")
        store.move_task("todo", 0, "done", 0)

        board = store.commit_edit("Moved and edited")

        assert board["done"].tasks[0].id == "task-1"
        assert board["done"].tasks[0].content == "Moved and edited"


@pytest.mark.unit
class TestCancelEdit:
    """Tests for cancel_edit."""

    def test_cancel_edit_clears_session(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")
        before = store.board

        store.cancel_edit()

        assert store.editing is None
        assert store.board is before

    def test_cancel_without_session_is_harmless(self, store: BoardStore) -> None:
        store.cancel_edit()

        assert store.editing is None


@pytest.mark.unit
class TestSessionEndsWithTarget:
    """Deleting the task under edit ends the session."""

    def test_delete_task_ends_session(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")

        store.delete_task("todo", "task-1")

        assert store.editing is None

    def test_delete_column_ends_session(self, store: BoardStore) -> None:
        store.start_edit("inProgress", "task-3")

        store.delete_column("inProgress")

        assert store.editing is None

    def test_deleting_other_task_keeps_session(self, store: BoardStore) -> None:
        store.start_edit("todo", "task-1")

        store.delete_task("todo", "task-2")

        assert store.editing == ("todo", "task-1")
