"""SQLite engine and session handling for the stored-value table."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.storage.models import Base

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Engine

MEMORY_PATH = ":memory:"


def _make_engine(db_path: str) -> Engine:
    if db_path == MEMORY_PATH:
        # One shared connection so TestClient threads see the same data
        return create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})


def _enable_wal(dbapi_connection: object, _connection_record: object) -> None:
    cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Database:
    """A SQLite file (or in-memory database) holding stored values.

    The schema is created on first use. Every unit of work goes through
    ``session()``, which commits on success and rolls back on error.
    """

    def __init__(self, db_path: str = "taskboard.db") -> None:
        self.db_path = db_path
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    def connect(self) -> sessionmaker[Session]:
        """Create the engine and schema if not done yet."""
        if self._sessions is None:
            self._engine = _make_engine(self.db_path)
            event.listen(self._engine, "connect", _enable_wal)
            Base.metadata.create_all(self._engine)
            self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._sessions

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session for one load or save."""
        session = self.connect()()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Dispose of the engine. A later ``session()`` reconnects."""
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._sessions = None
