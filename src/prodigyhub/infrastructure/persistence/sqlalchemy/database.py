"""Async database lifecycle.

A ``Database`` owns one engine and its session maker. It is created
explicitly (by the app factory or the CLI), connected on startup and
disconnected on shutdown; nothing here is a module-level singleton.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from prodigyhub.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine, session maker and schema management for one database URL."""

    def __init__(self, url: str, echo: bool = False):
        self._url = url
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            msg = "Database is not connected; call connect() first"
            raise RuntimeError(msg)
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self._session_maker is None:
            msg = "Database is not connected; call connect() first"
            raise RuntimeError(msg)
        return self._session_maker

    async def connect(self, create_schema: bool = True) -> None:
        """
        Create the engine and (optionally) the missing tables.

        Parameters
        ----------
        create_schema
            Run ``create_all`` after connecting. Existing tables and their
            data are never modified.
        """
        if self._engine is not None:
            return

        self._engine = create_async_engine(self._url, **self._engine_options())
        if make_url(self._url).get_backend_name() == "sqlite":
            _emit_sqlite_begin(self._engine)
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Connected to database: %s", self._safe_url())

        if create_schema:
            await self.create_schema()

    async def disconnect(self) -> None:
        """Dispose the engine and its connection pool."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.info("Database connections closed")

    async def create_schema(self) -> None:
        """Create all database tables (idempotent)."""
        logger.info("Ensuring all database tables exist...")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema is up to date")

    def _engine_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"echo": self._echo}
        url = make_url(self._url)

        if url.get_backend_name() == "sqlite":
            options["connect_args"] = {"check_same_thread": False}
            database = url.database or ""
            if database in ("", ":memory:"):
                # One shared connection, otherwise every session sees an empty DB
                options["poolclass"] = StaticPool
            else:
                Path(database).parent.mkdir(parents=True, exist_ok=True)
        else:
            options["pool_pre_ping"] = True

        return options

    def _safe_url(self) -> str:
        return make_url(self._url).render_as_string(hide_password=True)


def _emit_sqlite_begin(engine: AsyncEngine) -> None:
    """Let SQLAlchemy open SQLite transactions itself.

    The sqlite3 driver only issues BEGIN before DML, so a SAVEPOINT would
    start (and its RELEASE commit) the outer transaction. Switching the
    driver to autocommit and emitting BEGIN on every transaction start
    keeps savepoints nested inside the session transaction.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _driver_autocommit(dbapi_connection: Any, _record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")

