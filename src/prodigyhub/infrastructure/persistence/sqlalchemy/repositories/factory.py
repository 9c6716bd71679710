"""SQLAlchemy repository factory for creating session-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.area_repository import (
    AreaRepositorySQLAlchemy,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.qualification_repository import (
    QualificationRepositorySQLAlchemy,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._qualification_repo: QualificationRepositorySQLAlchemy | None = None
        self._area_repo: AreaRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def qualification_repository(self) -> QualificationRepositorySQLAlchemy:
        if self._qualification_repo is None:
            self._qualification_repo = QualificationRepositorySQLAlchemy(
                self._session,
            )
        return self._qualification_repo

    def area_repository(self) -> AreaRepositorySQLAlchemy:
        if self._area_repo is None:
            self._area_repo = AreaRepositorySQLAlchemy(self._session)
        return self._area_repo
