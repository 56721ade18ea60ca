"""Custom exceptions for Storage adapters."""


class StorageError(Exception):
    """Base exception for Storage errors."""


class StorageQuotaExceededError(StorageError):
    """Value is larger than the storage quota allows."""
