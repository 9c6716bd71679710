"""Check which services a location qualifies for and record the outcome."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from prodigyhub.application.commands.qualification.create_qualification_command import (
    QUALIFICATION_RESOURCE_PATH,
)
from prodigyhub.domain.area import AreaRepository
from prodigyhub.domain.qualification import (
    DEFAULT_QUALIFICATION_TYPE,
    InfrastructureProvider,
    InvalidLocationError,
    Location,
    Qualification,
    QualificationEvaluator,
    QualificationRepository,
    RelatedParty,
    format_area_match_note,
    format_infrastructure_note,
    format_location_note,
    format_services_note,
)

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CheckLocationQualificationCommand:
    """Evaluate requested services at a location and persist the result.

    The stored record carries the structured location plus the legacy
    ``SLT_*`` notes that older dashboard clients read.
    """

    def __init__(
        self,
        qualification_repo: QualificationRepository,
        area_repo: AreaRepository,
        infrastructure_provider: InfrastructureProvider,
        evaluator: Optional[QualificationEvaluator] = None,
    ):
        self._qualification_repo = qualification_repo
        self._area_repo = area_repo
        self._provider = infrastructure_provider
        self._evaluator = evaluator or QualificationEvaluator()

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        infrastructure_provider: InfrastructureProvider,
    ) -> CheckLocationQualificationCommand:
        return cls(
            qualification_repo=factory.qualification_repository(),
            area_repo=factory.area_repository(),
            infrastructure_provider=infrastructure_provider,
        )

    async def execute(
        self,
        location: Location,
        requested_services: Sequence[str] = (),
        include_alternatives: bool = False,
        related_parties: Optional[Sequence[RelatedParty]] = None,
        description: Optional[str] = None,
    ) -> Qualification:
        """
        Run the check.

        Parameters
        ----------
        location
            Where service is requested; district and province are required
        requested_services
            Service names as entered, e.g. "Fiber 100M"
        include_alternatives
            Also record the alternative services available at the location
        related_parties
            Customer details to store with the record
        description
            Free-text description to store with the record

        Returns
        -------
        The persisted qualification in state ``done``.

        Raises
        ------
        InvalidLocationError
            If district or province is missing
        """
        if not location.district or not location.province:
            msg = "District and province are required"
            raise InvalidLocationError(msg)

        infrastructure = await self._provider.get_availability(location)
        evaluation = self._evaluator.evaluate(
            requested_services,
            infrastructure,
            include_alternatives=include_alternatives,
        )
        area = await self._area_repo.find_by_location(
            location.district,
            location.province,
        )

        notes = [format_location_note(location)]
        if requested_services:
            notes.append(format_services_note(requested_services))
        notes.append(format_infrastructure_note(infrastructure))
        notes.append(
            format_area_match_note(area.name if area else None, evaluation.result),
        )

        qualification = Qualification.create(
            type=DEFAULT_QUALIFICATION_TYPE,
            description=description
            or f"Location qualification for {location.district}, {location.province}",
            provide_alternative=include_alternatives,
            notes=notes,
            related_parties=related_parties,
            location=location,
            requested_services=requested_services,
        )
        qualification.record_evaluation(
            infrastructure=infrastructure,
            result=evaluation.result,
            estimated_installation_time=evaluation.estimated_installation_time,
            alternative_options=evaluation.alternative_options,
        )
        qualification.assign_href(f"{QUALIFICATION_RESOURCE_PATH}/{qualification.id}")

        await self._qualification_repo.save(qualification)
        logger.info(
            "Location %s/%s %s for %s (provider: %s)",
            location.district,
            location.province,
            evaluation.result.value,
            ", ".join(requested_services) or "no services",
            self._provider.name,
        )
        return qualification
