"""Update a serviced area."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from prodigyhub.domain.area import (
    Area,
    AreaNotFoundError,
    AreaRepository,
    AreaStatus,
    AreaType,
    DuplicateAreaError,
)
from prodigyhub.domain.qualification import InfrastructureAvailability

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class UpdateAreaCommand:
    def __init__(self, area_repo: AreaRepository):
        self._area_repo = area_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateAreaCommand:
        return cls(area_repo=factory.area_repository())

    async def execute(  # NOQA: PLR0913
        self,
        area_id: str,
        name: Optional[str] = None,
        district: Optional[str] = None,
        province: Optional[str] = None,
        area_type: Optional[Union[str, AreaType]] = None,
        status: Optional[Union[str, AreaStatus]] = None,
        infrastructure: Optional[InfrastructureAvailability] = None,
        postal_code: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Area:
        area = await self._area_repo.find_by_id(area_id)
        if area is None:
            raise AreaNotFoundError(area_id)

        area.update(
            name=name,
            district=district,
            province=province,
            area_type=area_type,
            status=status,
            infrastructure=infrastructure,
            postal_code=postal_code,
            description=description,
        )

        # Moving the area must not collide with another one
        if district is not None or province is not None:
            other = await self._area_repo.find_by_location(area.district, area.province)
            if other is not None and other.id != area.id:
                raise DuplicateAreaError(area.district, area.province)

        await self._area_repo.save(area)
        return area
