"""Storage - opaque key-value byte stores for persisted boards."""

from taskboard.storage.adapter import (
    DEFAULT_QUOTA_BYTES,
    DEFAULT_STORAGE_KEY,
    MemoryStorage,
    SQLiteStorage,
    StorageAdapter,
)
from taskboard.storage.exceptions import StorageError, StorageQuotaExceededError

__all__ = [
    "DEFAULT_QUOTA_BYTES",
    "DEFAULT_STORAGE_KEY",
    "MemoryStorage",
    "SQLiteStorage",
    "StorageAdapter",
    "StorageError",
    "StorageQuotaExceededError",
]
