"""List users with optional filters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from prodigyhub.domain.user import User, UserRepository, UserStatus

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class ListUsersQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(  # NOQA: PLR0913
        self,
        status: Optional[Union[str, UserStatus]] = None,
        district: Optional[str] = None,
        province: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[User]:
        return await self._user_repo.find_all(
            status=UserStatus(status) if status is not None else None,
            district=district,
            province=province,
            limit=limit,
            offset=offset,
        )

    async def active_in_district(self, district: str) -> list[User]:
        return await self.execute(status=UserStatus.ACTIVE, district=district)

    async def active_in_province(self, province: str) -> list[User]:
        return await self.execute(status=UserStatus.ACTIVE, province=province)
