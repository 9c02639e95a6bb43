"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from api.books import get_store
from api.main import app
from api.store import BookStore


@pytest.fixture
def store():
    """Store holding the four default books."""
    return BookStore.seeded()


@pytest.fixture
def empty_store():
    """Store without any books."""
    return BookStore()


def _client_for(book_store):
    app.dependency_overrides[get_store] = lambda: book_store
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    """Test client wired to the seeded store fixture."""
    yield from _client_for(store)


@pytest.fixture
def empty_client(empty_store):
    """Test client wired to the empty store fixture."""
    yield from _client_for(empty_store)
