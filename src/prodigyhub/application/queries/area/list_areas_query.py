from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from prodigyhub.domain.area import Area, AreaRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class ListAreasQuery:
    """Query to list areas matching all given filters."""

    def __init__(self, area_repo: AreaRepository):
        self._area_repo = area_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAreasQuery:
        return cls(area_repo=factory.area_repository())

    async def execute(  # NOQA: PLR0913
        self,
        province: Optional[str] = None,
        district: Optional[str] = None,
        area_type: Optional[str] = None,
        status: Optional[str] = None,
        offset: int = 0,
        limit: int = 100,
    ) -> list[Area]:
        return await self._area_repo.find_all(
            province=province,
            district=district,
            area_type=area_type,
            status=status,
            limit=limit,
            offset=offset,
        )
