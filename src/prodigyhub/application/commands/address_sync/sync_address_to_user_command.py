"""Apply the oldest available qualification location to one user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from prodigyhub.domain.address_sync import extract_address
from prodigyhub.domain.qualification import (
    InvalidLocationError,
    QualificationNotFoundError,
    QualificationRepository,
)
from prodigyhub.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SyncAddressToUserCommand:
    """Give a specific user the address of the oldest located qualification."""

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        user_repo: UserRepository,
    ):
        self._qualification_repo = qualification_repo
        self._user_repo = user_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SyncAddressToUserCommand:
        return cls(
            qualification_repo=factory.qualification_repository(),
            user_repo=factory.user_repository(),
        )

    async def execute(self, user_id: UUID) -> User:
        """
        Sync an address onto the given user.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        QualificationNotFoundError
            If no qualification carries a location
        InvalidLocationError
            If the qualification's location cannot be read as an address
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        qualifications = await self._qualification_repo.find_with_location(limit=1)
        if not qualifications:
            msg = "No qualification with address data found"
            raise QualificationNotFoundError(message=msg)
        qualification = qualifications[0]

        address = extract_address(qualification)
        if address is None:
            msg = "No valid address found in qualification"
            raise InvalidLocationError(msg, qualification_id=qualification.id)

        user.change_address(address)
        await self._user_repo.save(user)

        logger.info("Synced address of %s to user %s", qualification.id, user.email)
        return user
