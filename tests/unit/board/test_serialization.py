"""Unit tests for the board JSON codec."""

import json

import pytest

from taskboard.board import (
    Board,
    BoardDecodeError,
    Column,
    Task,
    default_board,
    deserialize,
    serialize,
)


@pytest.mark.unit
class TestRoundTrip:
    """deserialize(serialize(board)) == board."""

    @pytest.mark.parametrize(
        "board",
        [
            Board(),
            Board((Column(id="only", title="Only"),)),
            default_board(),
        ],
        ids=["empty", "one-empty-column", "default"],
    )
    def test_round_trip(self, board: Board) -> None:
        assert deserialize(serialize(board)) == board

    def test_column_order_survives(self) -> None:
        board = Board(
            (
                Column(id="z", title="Last alphabetically"),
                Column(id="a", title="First alphabetically"),
            )
        )

        assert deserialize(serialize(board)).column_ids == ["z", "a"]

    def test_unicode_content(self) -> None:
        board = Board((Column(id="c", title="Día", tasks=(Task(id="t", content="naïve ✓"),)),))

        assert deserialize(serialize(board)) == board

    def test_accepts_str(self) -> None:
        assert deserialize(serialize(default_board()).decode("utf-8")) == default_board()


@pytest.mark.unit
class TestDecodeErrors:
    """Bytes that cannot become a valid board raise BoardDecodeError."""

    @pytest.mark.parametrize(
        "payload",
        [
            "[]",
            '"text"',
            '{"c": {"id": "c", "title": "C"}}',
            '{"c": {"id": "c", "title": "C", "tasks": [], "color": "red"}}',
            '{"c": {"id": "c", "title": "", "tasks": []}}',
            '{"c": {"id": "c", "title": "C", "tasks": [{"id": 1, "content": "x"}]}}',
            '{"c": {"id": "d", "title": "C", "tasks": []}}',
        ],
    )
    def test_schema_violations(self, payload: str) -> None:
        with pytest.raises(BoardDecodeError):
            deserialize(payload.encode())

    def test_invalid_json(self) -> None:
        with pytest.raises(BoardDecodeError):
            deserialize(b"{not json")

    def test_duplicate_task_ids_across_columns(self) -> None:
        payload = {
            "a": {"id": "a", "title": "A", "tasks": [{"id": "t", "content": "x"}]},
            "b": {"id": "b", "title": "B", "tasks": [{"id": "t", "content": "y"}]},
        }

        with pytest.raises(BoardDecodeError, match="inconsistent"):
            deserialize(json.dumps(payload).encode())

    def test_whitespace_title(self) -> None:
        payload = {"a": {"id": "a", "title": "  ", "tasks": []}}

        with pytest.raises(BoardDecodeError):
            deserialize(json.dumps(payload).encode())
