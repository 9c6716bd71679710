from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.domain.area import Area, AreaNotFoundError, AreaRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class GetAreaQuery:
    def __init__(self, area_repo: AreaRepository):
        self._area_repo = area_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetAreaQuery:
        return cls(area_repo=factory.area_repository())

    async def execute(self, area_id: str) -> Area:
        area = await self._area_repo.find_by_id(area_id)
        if area is None:
            raise AreaNotFoundError(area_id)
        return area
