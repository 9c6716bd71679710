"""Sync the address of a single, just-saved qualification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from prodigyhub.domain.address_sync import (
    UserMatch,
    UserMatcher,
    extract_address,
    extract_customer_email,
)
from prodigyhub.domain.qualification import Qualification
from prodigyhub.domain.user import UserRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SyncQualificationAddressCommand:
    """Copy one qualification's location to its customer.

    Unlike the batch sync this never overwrites an existing address:
    without an email match only a user lacking an address is considered.
    """

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo
        self._matcher = UserMatcher(user_repo)

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> SyncQualificationAddressCommand:
        return cls(user_repo=factory.user_repository())

    async def execute(self, qualification: Qualification) -> Optional[UserMatch]:
        """
        Returns
        -------
        The match that received the address, or None if nothing was synced.
        """
        if not qualification.has_location:
            return None

        address = extract_address(qualification)
        if address is None:
            logger.debug("Qualification %s has no usable location", qualification.id)
            return None

        match = await self._matcher.find_target(
            email=extract_customer_email(qualification),
            allow_overwrite=False,
        )
        if match is None:
            logger.info("No user to receive address of %s", qualification.id)
            return None

        match.user.change_address(address)
        await self._user_repo.save(match.user)
        logger.info(
            "Synced address of %s to %s (%s)",
            qualification.id,
            match.user.email,
            match.method.value,
        )
        return match
