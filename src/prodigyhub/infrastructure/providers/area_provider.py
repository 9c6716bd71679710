"""Availability backed by the stored serviced areas."""

import logging

from prodigyhub.domain.area import AreaRepository
from prodigyhub.domain.qualification import (
    InfrastructureAvailability,
    InfrastructureProvider,
    Location,
)

logger = logging.getLogger(__name__)


class AreaInfrastructureProvider(InfrastructureProvider):
    """Return the infrastructure recorded for the matching area.

    Locations without a registered area are answered by ``fallback``.
    """

    def __init__(self, area_repo: AreaRepository, fallback: InfrastructureProvider):
        self._area_repo = area_repo
        self._fallback = fallback

    @property
    def name(self) -> str:
        return "area"

    async def get_availability(
        self,
        location: Location,
    ) -> InfrastructureAvailability:
        area = await self._area_repo.find_by_location(
            location.district,
            location.province,
        )
        if area is not None:
            logger.debug("Using infrastructure of area %s (%s)", area.id, area.name)
            return area.infrastructure

        logger.info(
            "No area registered for %s/%s, using %s provider",
            location.district,
            location.province,
            self._fallback.name,
        )
        return await self._fallback.get_availability(location)
