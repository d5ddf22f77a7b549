from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from zoo.config import Settings, settings

# Naming conventions for database constraints, so generated DDL gets
# predictable names on every backend.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",  # Index
    "uq": "uq_%(table_name)s_%(column_0_name)s",  # Unique constraint
    "ck": "ck_%(table_name)s_%(constraint_name)s",  # Check constraint
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # Foreign key
    "pk": "pk_%(table_name)s",  # Primary key
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Base.metadata tracks every registered model, so create_all() can build
    the schema for tests and local runs.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def engine_options(config: Settings) -> dict[str, Any]:
    """Keyword arguments for create_async_engine() derived from settings.

    SQLite has no connection pool worth tuning and no asyncpg options,
    so only the echo flag applies there.
    """
    if config.is_sqlite:
        return {"echo": config.db_echo}
    return {
        "pool_size": config.db_pool_size,  # Persistent connections
        "max_overflow": config.db_max_overflow,  # Extra connections under load
        "pool_timeout": config.db_pool_timeout,  # Wait time for available connection
        "pool_recycle": config.db_pool_recycle,  # Max connection age
        "pool_pre_ping": config.db_pool_pre_ping,  # Test connection before checkout
        "echo": config.db_echo,
        # asyncpg driver options, passed directly to asyncpg.connect()
        "connect_args": {"command_timeout": config.db_statement_timeout},
    }


engine = create_async_engine(settings.database_url, **engine_options(settings))

# expire_on_commit=False keeps animals usable after commit without re-querying,
# since touching expired attributes would need sync I/O.
async_session = async_sessionmaker(engine, expire_on_commit=False)


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession] = async_session,
) -> AsyncIterator[AsyncSession]:
    """Scoped store handle: commit on success, roll back on exception, then close.

    This is the single place where transaction boundaries are managed.
    The manager and repository never call commit() or rollback().

    Usage:
        async with session_scope() as db:
            manager = AnimalsManager(AnimalRepository(db))
            await manager.add(animal)
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request."""
    async with session_scope() as session:
        yield session


async def shutdown() -> None:
    """Close all pooled database connections. Called from the app lifespan."""
    await engine.dispose()
