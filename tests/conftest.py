"""Test fixtures: fresh in-memory database per test + httpx client against the app."""

import os

# Must be set before the settings object is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from registration_api.api.deps import get_user_store
from registration_api.db.session import Base, get_db


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """App client with get_db pointed at the test database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


class FailingUserStore:
    """Store whose every call raises, as if the database were unreachable."""

    def __init__(self):
        self.saved = []

    async def find_one(self, **filters):
        raise RuntimeError("database unreachable")

    async def save(self, user):
        self.saved.append(user)
        raise RuntimeError("database unreachable")


@pytest.fixture
def failing_store(client):
    store = FailingUserStore()
    app.dependency_overrides[get_user_store] = lambda: store
    return store
