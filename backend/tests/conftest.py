"""
Notes API: Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── clock:          FakeClock, one second per reading
    ├── store:          Empty NoteStore on the fake clock
    ├── manual_service / schema_service: NoteService per validation strategy
    ├── make_client:    Builds an HTTPX AsyncClient for a fresh app
    └── test_client:    AsyncClient for the default (manual) app
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set before any notes_api import builds the module-level settings
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ.pop("VALIDATION_STRATEGY", None)

from notes_api.config import Settings  # noqa: E402
from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_service import NoteService  # noqa: E402
from notes_api.services.validation import ManualNoteValidator, SchemaNoteValidator  # noqa: E402
from notes_api.storage.note_store import NoteStore  # noqa: E402


class FakeClock:
    """Deterministic clock: each call returns the current time, then advances it."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> str:
        value = self.current.isoformat(timespec="microseconds")
        self.current += self.step
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return NoteStore(clock=clock)


@pytest.fixture
def manual_service(store):
    return NoteService(store=store, validator=ManualNoteValidator())


@pytest.fixture
def schema_service(store):
    return NoteService(store=store, validator=SchemaNoteValidator())


@pytest.fixture
def make_client(clock):
    """
    Factory for clients bound to a fresh app.

    Usage:
        async with make_client(validation_strategy="schema") as client:
            response = await client.get("/notes")
    """

    def _make(store=None, raise_app_exceptions=True, **overrides):
        settings = Settings(**overrides)
        app = create_app(settings=settings, store=store if store is not None else NoteStore(clock=clock))
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest_asyncio.fixture
async def test_client(make_client):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    async with make_client() as client:
        yield client
