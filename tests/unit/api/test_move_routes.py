"""Unit tests for move routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskboard.api.app import register_exception_handlers
from taskboard.api.dependencies import get_board_store
from taskboard.api.routes import moves
from taskboard.board import BoardStore
from taskboard.storage import MemoryStorage


@pytest.fixture
def store() -> BoardStore:
    """Create a BoardStore on in-memory storage."""
    return BoardStore(storage=MemoryStorage())


@pytest.fixture
def client(store: BoardStore):
    """Create a test client for the moves router."""
    app = FastAPI()

    def override_get_board_store():
        yield store

    app.dependency_overrides[get_board_store] = override_get_board_store
    register_exception_handlers(app)
    app.include_router(moves.router, prefix="/api/v1")

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def ids_in(body: dict, index: int) -> list[str]:
    return [t["id"] for t in body["data"]["columns"][index]["tasks"]]


@pytest.mark.unit
class TestMove:
    """Tests for POST /moves."""

    def test_move_across_columns(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/moves",
            json={
                "source_column_id": "todo",
                "source_index": 0,
                "dest_column_id": "inProgress",
                "dest_index": 1,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert ids_in(body, 0) == ["task-2"]
        assert ids_in(body, 1) == ["task-3", "task-1"]
        assert ids_in(body, 2) == ["task-4"]

    def test_move_out_of_range(self, client: TestClient, store: BoardStore) -> None:
        before = store.board

        response = client.post(
            "/api/v1/moves",
            json={
                "source_column_id": "todo",
                "source_index": 2,
                "dest_column_id": "done",
                "dest_index": 0,
            },
        )

        assert response.status_code == 400
        assert "source_index 2" in response.json()["error"]
        assert store.board is before

    def test_move_unknown_column(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/moves",
            json={
                "source_column_id": "todo",
                "source_index": 0,
                "dest_column_id": "archive",
                "dest_index": 0,
            },
        )

        assert response.status_code == 404

    def test_move_missing_field(self, client: TestClient) -> None:
        response = client.post("/api/v1/moves", json={"source_column_id": "todo"})

        assert response.status_code == 422


@pytest.mark.unit
class TestDrop:
    """Tests for POST /moves/drop."""

    def test_drop_within_column(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/moves/drop",
            json={
                "draggableId": "task-1",
                "source": {"droppableId": "todo", "index": 0},
                "destination": {"droppableId": "todo", "index": 1},
            },
        )

        assert response.status_code == 200
        assert ids_in(response.json(), 0) == ["task-2", "task-1"]

    def test_cancelled_drop_returns_board(self, client: TestClient, store: BoardStore) -> None:
        before = store.board

        response = client.post(
            "/api/v1/moves/drop",
            json={"source": {"droppableId": "todo", "index": 0}, "destination": None},
        )

        assert response.status_code == 200
        assert ids_in(response.json(), 0) == ["task-1", "task-2"]
        assert store.board is before

    def test_malformed_drop(self, client: TestClient) -> None:
        response = client.post("/api/v1/moves/drop", json={"source": {"index": 0}})

        assert response.status_code == 400
