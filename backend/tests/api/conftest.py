"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched for the readiness probe, which bypasses get_db
    - Seeded rows are committed through their own session, never shared with requests

Design Decisions:
    - SQLite in-memory with StaticPool: one connection, so every session sees the
      same database (PostgreSQL row locks are not exercised here)
"""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from artify.db.base import Base
from artify.infrastructure.database import get_db, DatabaseSessionManager
from artify.models.artwork import Artwork
import artify.infrastructure.database as db_module
import artify.models  # noqa: F401
from artify.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed_artwork(test_session_factory):
    """Insert an artwork row directly and return its id as a string."""
    async def _seed(**overrides):
        fields = dict(
            id=uuid.uuid4(),
            title="Untitled",
            category="Painting",
            visibility="Public",
            user_email="a@x.com",
            user_name="Ann",
            dimensions="",
            price=0.0,
            likes_count=0,
            created_at=datetime.now(timezone.utc),
        )
        fields.update(overrides)
        async with test_session_factory() as db:
            db.add(Artwork(**fields))
            await db.commit()
        return str(fields["id"])
    return _seed


@pytest.fixture
def create_via_api(client):
    """Create an artwork through POST /api/artworks and return its id."""
    async def _create(**body):
        payload = {
            "title": "Sunset", "category": "Painting",
            "userEmail": "a@x.com", "visibility": "Public",
        }
        payload.update(body)
        res = await client.post("/api/artworks", json=payload)
        assert res.status_code == 200, res.text
        return res.json()["id"]
    return _create
