"""Look up a single user."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from prodigyhub.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class GetUserQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def by_email(self, email: str) -> User:
        """
        Raises
        ------
        UserNotFoundError
            If no user has this email
        InvalidEmailError
            If the email is malformed
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user
