import os
from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

import zoo.models  # noqa: F401  registers models with Base.metadata
from zoo.db.session import Base, get_db
from zoo.main import app
from zoo.repositories.animal import AnimalRepository
from zoo.services.animal import AnimalsManager

# Fixtures outside conftest.py are only visible once registered here.
pytest_plugins = ["tests.seeds"]

# In-memory SQLite by default, so the suite needs no server.
# Set TEST_DATABASE_URL=postgresql+asyncpg://zoo@localhost:5432/zoo_test to run on Postgres.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _poolclass() -> type[NullPool] | type[StaticPool]:
    # An in-memory SQLite database lives as long as its single connection.
    if TEST_DATABASE_URL.startswith("sqlite"):
        return StaticPool
    return NullPool


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Create tables, yield the engine, then drop tables after the test."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=_poolclass())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def manager(db: AsyncSession) -> AnimalsManager:
    return AnimalsManager(AnimalRepository(db))


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """HTTP client that uses the test database session."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
