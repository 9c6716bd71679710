"""Delete a serviced area."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prodigyhub.domain.area import Area, AreaNotFoundError, AreaRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteAreaCommand:
    def __init__(self, area_repo: AreaRepository):
        self._area_repo = area_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteAreaCommand:
        return cls(area_repo=factory.area_repository())

    async def execute(self, area_id: str) -> Area:
        """Delete the area and return it as it was before deletion."""
        area = await self._area_repo.find_by_id(area_id)
        if area is None:
            raise AreaNotFoundError(area_id)

        await self._area_repo.delete(area_id)
        logger.info("Deleted area %s (%s)", area.name, area.district)
        return area
