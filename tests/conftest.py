"""
Notes API: Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the whole suite.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings with the simulated-database delay disabled
    ├── note_store: A freshly seeded NoteStore
    ├── note_service: NoteService over note_store
    ├── app: create_app() wired to test_settings and note_store
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os

# Set before any notes_api import so the module-level settings pick them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["FAKE_DB_LATENCY"] = "0"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from notes_api.config import Settings
from notes_api.main import create_app
from notes_api.services.note_service import NoteService
from notes_api.store import NoteStore


@pytest.fixture
def test_settings():
    return Settings(fake_db_latency=0, log_level="WARNING")


@pytest.fixture
def note_store():
    """A NoteStore holding only the two seed notes."""
    return NoteStore()


@pytest.fixture
def note_service(note_store):
    return NoteService(note_store)


@pytest.fixture
def app(test_settings, note_store):
    return create_app(app_settings=test_settings, store=note_store)


@pytest.fixture
def make_request():
    """
    Builds a bare Starlette Request for unit-testing error stages.

    Usage:
        request = make_request("POST", "/notes")
    """

    def _make(method: str = "GET", path: str = "/"):
        return Request(
            {
                "type": "http",
                "method": method,
                "path": path,
                "headers": [],
                "query_string": b"",
            }
        )

    return _make


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app.

    raise_app_exceptions=False lets faults that escape the error chain come
    back as the host's default 500 response instead of being re-raised into
    the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
