"""Key-value byte stores the board is persisted to.

Both adapters hold a single value under a single key and offer nothing beyond
overwrite-on-save: no history, no transactions spanning several saves.
"""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from taskboard.storage.database import Database
from taskboard.storage.exceptions import StorageError, StorageQuotaExceededError
from taskboard.storage.models import StoredValue

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "eLearningKanbanColumns"
# Browsers typically allow about 5 MiB of localStorage per origin
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


class StorageAdapter(Protocol):
    """Interface for an opaque byte store."""

    def load(self) -> bytes | None:
        """Return the stored bytes, or None if nothing was saved."""
        ...

    def save(self, data: bytes) -> None:
        """Overwrite the stored bytes. Raises StorageError on failure."""
        ...

    def close(self) -> None:
        """Release any underlying resources."""
        ...


def _check_quota(data: bytes, quota_bytes: int | None) -> None:
    if quota_bytes is not None and len(data) > quota_bytes:
        raise StorageQuotaExceededError(
            f"Value of {len(data)} bytes exceeds storage quota of {quota_bytes} bytes"
        )


class MemoryStorage:
    """In-process storage, for tests and throwaway sessions."""

    def __init__(self, data: bytes | None = None, quota_bytes: int | None = None) -> None:
        self._data = data
        self.quota_bytes = quota_bytes
        self.save_count = 0

    def load(self) -> bytes | None:
        return self._data

    def save(self, data: bytes) -> None:
        _check_quota(data, self.quota_bytes)
        self._data = data
        self.save_count += 1

    def close(self) -> None:
        pass


class SQLiteStorage:
    """Storage backed by a single row of a SQLite table."""

    def __init__(
        self,
        db_path: str = "taskboard.db",
        key: str = DEFAULT_STORAGE_KEY,
        quota_bytes: int | None = DEFAULT_QUOTA_BYTES,
    ) -> None:
        """Initialize SQLite storage.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file, or ":memory:"
            key: Key the value is stored under
            quota_bytes: Largest value accepted by save, None for no limit

        Raises:
            StorageError: If the database cannot be opened
        """
        self.key = key
        self.quota_bytes = quota_bytes
        self._db = Database(db_path)
        try:
            self._db.connect()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to open database '{db_path}': {e}") from e

    def load(self) -> bytes | None:
        """Return the stored bytes for this key, or None.

        Raises:
            StorageError: If the database cannot be read
        """
        try:
            with self._db.session() as session:
                row = session.get(StoredValue, self.key)
                return None if row is None else row.value
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load key '{self.key}': {e}") from e

    def save(self, data: bytes) -> None:
        """Overwrite the value for this key.

        Raises:
            StorageQuotaExceededError: If data is larger than the quota
            StorageError: If the database write fails
        """
        _check_quota(data, self.quota_bytes)
        try:
            with self._db.session() as session:
                row = session.get(StoredValue, self.key)
                if row is None:
                    session.add(StoredValue(key=self.key, value=data))
                else:
                    row.value = data
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to save key '{self.key}': {e}") from e
        logger.debug("Saved %d bytes under key %s", len(data), self.key)

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()
