"""Repository tests run against SQLite and, when enabled, PostgreSQL.

The ``session`` fixture is parametrized over both backends; the
PostgreSQL variant carries the ``integration`` marker and is auto-skipped
unless integration tests are requested.
"""

import pytest

# Re-export shared fixtures so pytest can resolve them here
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_session,
)

__all__ = ["async_engine", "db_session", "postgres_container", "sqlite_session"]


@pytest.fixture(
    params=[
        "sqlite",
        pytest.param("postgres", marks=pytest.mark.integration),
    ],
)
def session(request):
    """An empty-schema session on each supported backend."""
    if request.param == "postgres":
        return request.getfixturevalue("db_session")
    return request.getfixturevalue("sqlite_session")
