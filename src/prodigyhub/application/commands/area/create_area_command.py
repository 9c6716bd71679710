"""Register a serviced area."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from prodigyhub.domain.area import (
    Area,
    AreaRepository,
    AreaStatus,
    AreaType,
    DuplicateAreaError,
)
from prodigyhub.domain.qualification import InfrastructureAvailability

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateAreaCommand:
    """Create an area; at most one exists per district and province."""

    def __init__(self, area_repo: AreaRepository):
        self._area_repo = area_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateAreaCommand:
        return cls(area_repo=factory.area_repository())

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        district: str,
        province: str,
        area_type: Union[str, AreaType] = AreaType.SUBURBAN,
        status: Union[str, AreaStatus] = AreaStatus.ACTIVE,
        infrastructure: Optional[InfrastructureAvailability] = None,
        postal_code: Optional[str] = None,
        description: Optional[str] = None,
        created_by: str = "system",
    ) -> Area:
        area = Area(
            name=name,
            district=district,
            province=province,
            area_type=area_type,
            status=status,
            infrastructure=infrastructure,
            postal_code=postal_code,
            description=description,
            created_by=created_by,
        )
        existing = await self._area_repo.find_by_location(area.district, area.province)
        if existing is not None:
            raise DuplicateAreaError(area.district, area.province)

        await self._area_repo.save(area)
        logger.info("Created area %s for %s/%s", area.name, area.district, area.province)
        return area
