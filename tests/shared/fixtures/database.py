"""
Database fixtures for repository tests.

``sqlite_session`` runs on an in-memory SQLite ``Database`` (the same
class the app uses) and needs nothing installed beyond aiosqlite.
``db_session`` runs on a throwaway PostgreSQL container and is meant for
tests marked ``integration``.

Both yield an ``AsyncSession`` on an empty schema; uncommitted work is
rolled back afterwards.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from prodigyhub.infrastructure.persistence.sqlalchemy.database import Database
from prodigyhub.infrastructure.persistence.sqlalchemy.models import Base

# Same major version as the deployed database
POSTGRES_IMAGE = "postgres:18-alpine"


def _asyncpg_url(url: str) -> str:
    """Testcontainers hands out psycopg2 URLs; the app talks asyncpg."""
    for prefix in ("postgresql+psycopg2://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix) :]
    return url


async def _reset_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(scope="session")
def postgres_container():
    """One container per session; tests isolate by recreating the schema."""
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def async_engine(postgres_container) -> AsyncEngine:
    return create_async_engine(
        _asyncpg_url(postgres_container.get_connection_url()),
        poolclass=NullPool,  # connections must not outlive a test's event loop
    )


@pytest_asyncio.fixture
async def db_session(async_engine):
    await _reset_schema(async_engine)

    session_maker = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session
        await session.rollback()

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def sqlite_session():
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.connect()
    try:
        async with database.session_maker() as session:
            yield session
            await session.rollback()
    finally:
        await database.disconnect()
