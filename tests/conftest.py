"""Shared pytest fixtures and configuration."""

import pytest

from taskboard.board import BoardStore
from taskboard.storage import MemoryStorage


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store(memory_storage: MemoryStorage) -> BoardStore:
    """BoardStore starting from the default board."""
    return BoardStore(storage=memory_storage)
