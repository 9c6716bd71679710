"""ProdigyHub settings.

Values come from, highest priority first:

1. OS environment variables
2. the file named by ``PRODIGYHUB_ENV_FILE`` (relative paths resolve
   against the project root)
3. ``config/.env.dev``, for local development
4. ``config/.env``, for Docker deployments
5. the defaults below

``config/.env.example`` lists every variable.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "PRODIGYHUB_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    """Nearest ancestor holding ``config/`` or ``.git``; ``/app`` in Docker."""
    here = Path(__file__).resolve().parent
    for parent in (here, *here.parents):
        if (parent / "config").is_dir() or (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent
    return here.parents[1]


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file() -> Optional[Path]:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    for name in ENV_FILE_CANDIDATES:
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration of the API, the CLI and the address sync."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "ProdigyHub"
    debug: bool = False

    # Database: a local SQLite file unless DATABASE_BACKEND=postgresql
    database_backend: Literal["sqlite", "postgresql"] = "sqlite"
    sqlite_path: str = "./data/prodigyhub.db"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "prodigyhub"

    # API
    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8000
    api_debug: bool = False  # also serves /docs and /openapi.json
    api_cors_origins: str = ""  # comma-separated; empty disables CORS

    # Address sync
    address_sync_batch_limit: int = Field(default=50, ge=1)
    address_sync_on_save: bool = True

    # Where location checks read fiber/ADSL/mobile availability
    infrastructure_provider: Literal["random", "area"] = "random"

    # bcrypt cost factor; tests lower it to 4
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_backend == "sqlite":
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
