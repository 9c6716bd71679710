"""FastAPI dependency injection for the ProdigyHub API.

Provides dependencies for:
- Database sessions
- Application settings
- Repository factory
- Service instances (infrastructure provider, password hashing)
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from prodigyhub.domain.qualification import InfrastructureProvider
from prodigyhub.infrastructure.persistence.sqlalchemy.database import Database
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from prodigyhub.infrastructure.providers import (
    AreaInfrastructureProvider,
    RandomInfrastructureProvider,
)
from prodigyhub.infrastructure.security import PasswordHashingService
from prodigyhub_config.settings import Settings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Settings & Database Session
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the app's shared pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with database.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Repositories sharing the request's session (and transaction)."""
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_infrastructure_provider(
    factory: RepoFactory,
    settings: AppSettings,
) -> InfrastructureProvider:
    """
    Infrastructure availability source selected by settings.

    ``area`` looks up managed areas first and falls back to the random
    heuristic for locations no area covers.
    """
    fallback = RandomInfrastructureProvider()
    if settings.infrastructure_provider == "area":
        return AreaInfrastructureProvider(factory.area_repository(), fallback)
    return fallback


InfraProvider = Annotated[InfrastructureProvider, Depends(get_infrastructure_provider)]


def get_password_service(settings: AppSettings) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Application Commands & Queries
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_users(factory: RepoFactory, ...):
#       query = ListUsersQuery.from_factory(factory)  # NOQA: ERA001
