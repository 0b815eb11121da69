"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── store: Empty NoteStore
    ├── service: NoteService over `store`
    ├── app: FastAPI app built around `store`
    ├── test_client: HTTPX AsyncClient talking to `app`
    └── create_note: Helper that POSTs a note and returns its JSON
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402
from notes_api.store import NoteStore  # noqa: E402


@pytest.fixture
def store():
    return NoteStore()


@pytest.fixture
def service(store):
    return NoteService(store)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to a fresh app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def create_note(test_client):
    """POST a note and return the decoded 201 response body."""

    async def _create(title="Groceries", content="Milk, eggs"):
        response = await test_client.post(
            "/api/notes", json={"title": title, "content": content}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
