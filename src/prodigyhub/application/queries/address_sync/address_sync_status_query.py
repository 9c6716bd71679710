"""Address sync status - how far users have been given addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.application.dtos import AddressSyncStatus
from prodigyhub.domain.qualification import QualificationRepository
from prodigyhub.domain.user import UserRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class AddressSyncStatusQuery:
    def __init__(
        self,
        user_repo: UserRepository,
        qualification_repo: QualificationRepository,
    ):
        self._user_repo = user_repo
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddressSyncStatusQuery:
        return cls(
            user_repo=factory.user_repository(),
            qualification_repo=factory.qualification_repository(),
        )

    async def execute(self) -> AddressSyncStatus:
        return AddressSyncStatus(
            total_users=await self._user_repo.count(),
            users_with_address=await self._user_repo.count_with_address(),
            qualifications_with_location=(
                await self._qualification_repo.count_with_location()
            ),
        )
