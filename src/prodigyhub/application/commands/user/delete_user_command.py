"""Delete a customer account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from prodigyhub.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: UUID) -> User:
        """Delete the user and return it as it was before deletion."""
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        await self._user_repo.delete(user_id)
        logger.info("Deleted user %s", user.email)
        return user
