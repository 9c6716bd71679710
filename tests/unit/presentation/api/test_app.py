"""Tests for the application factory."""

from fastapi.testclient import TestClient

from prodigyhub.infrastructure.persistence.sqlalchemy.database import Database
from prodigyhub.presentation.api.app import API_PREFIX, create_app
from prodigyhub_config.settings import Settings


class TestCreateApp:
    def test_health_reports_database(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path}/health.db")
        app = create_app(settings=Settings(api_debug=True), database=database)

        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_root_lists_endpoints(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path}/root.db")
        app = create_app(settings=Settings(), database=database)

        with TestClient(app) as client:
            body = client.get("/").json()

        assert body["api_base"] == API_PREFIX
        assert body["endpoints"]["address_sync"] == "/api/sync-addresses"
        assert body["docs"] is None

    def test_docs_only_in_debug(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path}/docs.db")

        with TestClient(create_app(settings=Settings(), database=database)) as client:
            assert client.get("/docs").status_code == 404

    def test_settings_and_database_on_state(self):
        settings = Settings(app_name="TestHub")
        database = Database("sqlite+aiosqlite:///:memory:")

        app = create_app(settings=settings, database=database)

        assert app.state.settings is settings
        assert app.state.database is database
        assert app.title == "TestHub API"
