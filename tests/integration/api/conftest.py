"""Pytest fixtures for API tests.

Each test gets an app wired to its own SQLite file, created through the
real lifespan (connect + create schema) by entering ``TestClient``.
"""

from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from prodigyhub.infrastructure.persistence.sqlalchemy.database import Database
from prodigyhub.presentation.api.app import create_app
from tests.shared.fixtures.api import api_settings


@pytest.fixture
def make_client(tmp_path) -> Iterator[Callable[..., TestClient]]:
    """Build started clients; keyword arguments override settings."""
    clients: list[TestClient] = []

    def _make(**overrides) -> TestClient:
        database = Database(f"sqlite+aiosqlite:///{tmp_path}/api-{len(clients)}.db")
        app = create_app(settings=api_settings(**overrides), database=database)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    """Client with the default test settings (address sync on save enabled)."""
    return make_client()
