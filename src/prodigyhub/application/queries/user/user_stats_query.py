"""User counts by status and location."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.application.dtos import UserStats
from prodigyhub.domain.user import UserRepository, UserStatus

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class UserStatsQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UserStatsQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self) -> UserStats:
        by_status = await self._user_repo.count_by_status()
        return UserStats(
            total_users=await self._user_repo.count(),
            active_users=by_status.get(UserStatus.ACTIVE.value, 0),
            pending_users=by_status.get(UserStatus.PENDING.value, 0),
            unverified_users=by_status.get(UserStatus.UNVERIFIED.value, 0),
            users_by_province=await self._user_repo.count_by_province(),
            users_by_district=await self._user_repo.count_by_district(),
        )
