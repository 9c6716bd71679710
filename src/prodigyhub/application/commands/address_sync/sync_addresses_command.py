"""Batch-copy qualification locations onto user addresses."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any, AsyncContextManager

from prodigyhub.application.dtos import AddressSyncResult
from prodigyhub.domain.address_sync import (
    UserMatcher,
    extract_address,
    extract_customer_email,
)
from prodigyhub.domain.qualification import Qualification, QualificationRepository
from prodigyhub.domain.user import UserRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

DEFAULT_BATCH_LIMIT = 50


class SyncAddressesCommand:
    """Copy the location of each qualification onto a user's address.

    Records are processed oldest first, so when several records land on
    the same user the newest location wins. A failing record is logged
    and counted; it never stops the batch. Given a session, each record
    runs in its own savepoint, so a failed write undoes only that record
    and leaves the session usable for the rest.
    """

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        user_repo: UserRepository,
        batch_limit: int = DEFAULT_BATCH_LIMIT,
        session: Any = None,
    ):
        self._qualification_repo = qualification_repo
        self._user_repo = user_repo
        self._matcher = UserMatcher(user_repo)
        self._batch_limit = batch_limit
        self._session = session

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        batch_limit: int = DEFAULT_BATCH_LIMIT,
    ) -> SyncAddressesCommand:
        return cls(
            qualification_repo=factory.qualification_repository(),
            user_repo=factory.user_repository(),
            batch_limit=batch_limit,
            session=factory.session,
        )

    async def execute(self) -> AddressSyncResult:
        qualifications = await self._qualification_repo.find_with_location(
            limit=self._batch_limit,
        )
        result = AddressSyncResult(total_qualifications=len(qualifications))
        logger.info("Starting address sync for %d qualifications", len(qualifications))

        for qualification in qualifications:
            try:
                async with self._record_scope():
                    await self._sync_one(qualification, result)
            except Exception:
                logger.exception("Failed to sync address of %s", qualification.id)
                result.error_count += 1

        logger.info(
            "Address sync finished: %d synced, %d errors, %d heuristic matches",
            result.synced_count,
            result.error_count,
            result.heuristic_matches,
        )
        return result

    def _record_scope(self) -> AsyncContextManager[Any]:
        if self._session is None:
            return nullcontext()
        return self._session.begin_nested()

    async def _sync_one(
        self,
        qualification: Qualification,
        result: AddressSyncResult,
    ) -> None:
        address = extract_address(qualification)
        if address is None:
            logger.warning("No usable location on qualification %s", qualification.id)
            result.error_count += 1
            return

        match = await self._matcher.find_target(
            email=extract_customer_email(qualification),
        )
        if match is None:
            logger.warning("No user to receive address of %s", qualification.id)
            result.error_count += 1
            return

        match.user.change_address(address)
        await self._user_repo.save(match.user)

        result.synced_count += 1
        if match.is_heuristic:
            result.heuristic_matches += 1
        logger.debug(
            "Synced address of %s to %s (%s)",
            qualification.id,
            match.user.email,
            match.method.value,
        )
