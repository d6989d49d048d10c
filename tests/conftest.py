"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for all tests: a label catalog, the
in-memory repositories, a SQLite-backed database adapter on a temporary file
and a test client for the HTTP app built over the in-memory repositories.
"""

import sys
from pathlib import Path

# Add the project root directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from todo_tracker.adapters.database.sqlite import SQLiteAdapter
from todo_tracker.main import create_app
from todo_tracker.repositories.label import LabelRepositoryForDb
from todo_tracker.repositories.memory import LabelRepositoryForMemory, TodoRepositoryForMemory
from todo_tracker.repositories.todo import TodoRepositoryForDb
from todo_tracker.schemas.label import LabelEntity


@pytest.fixture
def label_catalog():
    """Labels known to the in-memory todo repository."""
    return [
        LabelEntity(id=1, name="label test 1"),
        LabelEntity(id=2, name="label test 2"),
    ]


@pytest.fixture
def todo_memory_repository(label_catalog) -> TodoRepositoryForMemory:
    """Create an empty in-memory todo repository."""
    return TodoRepositoryForMemory(label_catalog)


@pytest.fixture
def label_memory_repository() -> LabelRepositoryForMemory:
    """Create an empty in-memory label repository."""
    return LabelRepositoryForMemory()


@pytest_asyncio.fixture
async def sqlite_adapter(tmp_path):
    """Create a SQLite adapter on a temporary database file.

    This fixture:
    1. Creates a fresh database file under the test's tmp_path
    2. Initializes the adapter, which creates all tables
    3. Provides the adapter to the test
    4. Closes the adapter after the test
    """
    adapter = SQLiteAdapter(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await adapter.init()
    yield adapter
    await adapter.close()


@pytest.fixture
def label_db_repository(sqlite_adapter) -> LabelRepositoryForDb:
    return LabelRepositoryForDb(sqlite_adapter)


@pytest.fixture
def todo_db_repository(sqlite_adapter) -> TodoRepositoryForDb:
    return TodoRepositoryForDb(sqlite_adapter)


@pytest_asyncio.fixture
async def db_labels(label_db_repository):
    """Create two labels in the test database."""
    first = await label_db_repository.create("test label 1")
    second = await label_db_repository.create("test label 2")
    return [first, second]


@pytest.fixture
def client(todo_memory_repository, label_memory_repository):
    """Create a test client for the app built over the in-memory repositories."""
    app = create_app(todo_memory_repository, label_memory_repository)
    with TestClient(app) as client:
        yield client
