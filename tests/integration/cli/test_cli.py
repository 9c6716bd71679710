"""CLI tests against a throwaway SQLite file."""

import pytest
from typer.testing import CliRunner

from prodigyhub.presentation.cli.app import app
from prodigyhub_config.settings import clear_settings_cache

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_database(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_BACKEND", "sqlite")
    monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "cli.db"))
    monkeypatch.setenv("INFRASTRUCTURE_PROVIDER", "random")
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_sync_status_on_empty_database():
    result = runner.invoke(app, ["sync", "status"])

    assert result.exit_code == 0, result.output
    assert "Total users" in result.output
    assert "0%" in result.output


def test_sync_addresses_on_empty_database():
    result = runner.invoke(app, ["sync", "addresses", "--limit", "10"])

    assert result.exit_code == 0, result.output
    assert "Address sync completed" in result.output


def test_qualify_then_sync_status_counts_location():
    qualify = runner.invoke(
        app,
        ["qualify", "-d", "Colombo", "-p", "Western", "-s", "Fiber 100M"],
    )
    status = runner.invoke(app, ["sync", "status"])

    assert qualify.exit_code == 0, qualify.output
    assert "Colombo, Western" in qualify.output
    assert "Infrastructure" in qualify.output
    assert status.exit_code == 0, status.output
    assert "Qualifications with location" in status.output


def test_sync_user_unknown_id_exits_with_error():
    result = runner.invoke(
        app,
        ["sync", "user", "aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa"],
    )

    assert result.exit_code == 1
    assert "USER_NOT_FOUND" in result.output
