"""Area counts by status, province, type and infrastructure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.application.dtos import AreaStats
from prodigyhub.domain.area import AreaRepository, AreaStatus

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class AreaStatsQuery:
    def __init__(self, area_repo: AreaRepository):
        self._area_repo = area_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AreaStatsQuery:
        return cls(area_repo=factory.area_repository())

    async def execute(self) -> AreaStats:
        areas = await self._area_repo.find_all(limit=None)

        return AreaStats(
            total_areas=len(areas),
            active_areas=sum(1 for a in areas if a.status == AreaStatus.ACTIVE),
            planned_areas=sum(1 for a in areas if a.status == AreaStatus.PLANNED),
            areas_by_province=await self._area_repo.count_by_province(),
            areas_by_type=await self._area_repo.count_by_type(),
            fiber_areas=sum(1 for a in areas if a.infrastructure.fiber.available),
            adsl_areas=sum(1 for a in areas if a.infrastructure.adsl.available),
            mobile_areas=sum(1 for a in areas if a.infrastructure.mobile.available),
        )
