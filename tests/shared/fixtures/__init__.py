"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_session,
)
from tests.shared.fixtures.factories import (
    TestUserFactory,
    infrastructure,
    location_note,
    make_qualification,
)

__all__ = [
    "TestUserFactory",
    "async_engine",
    "db_session",
    "infrastructure",
    "location_note",
    "make_qualification",
    "postgres_container",
    "sqlite_session",
]
