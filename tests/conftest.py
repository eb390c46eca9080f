"""Shared pytest fixtures configured to use SQLite in-memory databases."""

import logging
import os
from datetime import datetime, timedelta, timezone
from itertools import count
from uuid import uuid4

# Must be set before the app (and its module-level engine) is imported
os.environ["QUICKNOTES_SKIP_LIFESPAN_DB"] = "1"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quicknotes.client.models import ClientNote
from quicknotes.core.models import BaseModel
from quicknotes.database import get_db_session
from quicknotes.main import app

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_engine():
    return create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )


async def _create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = make_engine()
    await _create_schema(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    session_maker = async_sessionmaker(test_engine, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def client():
    """TestClient whose requests and schema setup share one event loop."""
    engine = make_engine()
    session_maker = async_sessionmaker(engine, expire_on_commit=False)

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    with TestClient(app) as test_client:
        test_client.portal.call(_create_schema, engine)
        yield test_client
        test_client.portal.call(engine.dispose)
    app.dependency_overrides.clear()


@pytest.fixture
def note_payload():
    """Sample note data for testing."""
    return {
        "title": "Test Note",
        "content": "This is a test note content",
    }


@pytest.fixture
def make_note():
    """Factory for client-side notes with increasing timestamps."""
    sequence = count()
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def _make(title="Note", content="content", created=None, updated=None, **kwargs):
        step = next(sequence)
        created_at = created or base + timedelta(minutes=step)
        return ClientNote(
            id=kwargs.pop("id", str(uuid4())),
            title=title,
            content=content,
            created_at=created_at,
            updated_at=updated or created_at,
            **kwargs,
        )

    return _make
