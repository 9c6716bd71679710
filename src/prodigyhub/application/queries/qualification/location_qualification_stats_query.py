"""Availability statistics over recorded location checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.application.dtos import LocationQualificationStats
from prodigyhub.domain.qualification import (
    QualificationRepository,
    QualificationResult,
)

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class LocationQualificationStatsQuery:
    """Count fiber/ADSL availability across qualifications with infrastructure."""

    def __init__(self, qualification_repo: QualificationRepository):
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> LocationQualificationStatsQuery:
        return cls(qualification_repo=factory.qualification_repository())

    async def execute(self) -> LocationQualificationStats:
        qualifications = await self._qualification_repo.find_with_infrastructure()

        fiber = adsl = both = neither = qualified = 0
        for qualification in qualifications:
            infrastructure = qualification.infrastructure
            if infrastructure is None:
                continue
            has_fiber = infrastructure.fiber.available
            has_adsl = infrastructure.adsl.available

            fiber += has_fiber
            adsl += has_adsl
            both += has_fiber and has_adsl
            neither += not has_fiber and not has_adsl
            if qualification.qualification_result == QualificationResult.QUALIFIED:
                qualified += 1

        return LocationQualificationStats(
            total_qualifications=len(qualifications),
            fiber_available=fiber,
            adsl_available=adsl,
            both_available=both,
            neither_available=neither,
            qualified=qualified,
        )
