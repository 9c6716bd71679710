"""Create a CheckProductOfferingQualification record."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Sequence

from prodigyhub.domain.qualification import (
    DEFAULT_QUALIFICATION_TYPE,
    DuplicateQualificationError,
    Location,
    Note,
    Qualification,
    QualificationRepository,
    RelatedParty,
)

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

QUALIFICATION_RESOURCE_PATH = (
    "/api/productOfferingQualification/v5/checkProductOfferingQualification"
)


class CreateQualificationCommand:
    """Store a new qualification request as submitted by a client."""

    def __init__(self, qualification_repo: QualificationRepository):
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateQualificationCommand:
        return cls(qualification_repo=factory.qualification_repository())

    async def execute(  # NOQA: PLR0913
        self,
        type: str = DEFAULT_QUALIFICATION_TYPE,
        id: Optional[str] = None,
        state: Optional[str] = None,
        description: Optional[str] = None,
        effective_qualification_date: Optional[datetime] = None,
        instant_sync_qualification: bool = False,
        provide_alternative: bool = False,
        provide_only_available: bool = False,
        provide_result_reason: bool = False,
        notes: Optional[Sequence[Note]] = None,
        related_parties: Optional[Sequence[RelatedParty]] = None,
        qualification_result: Optional[str] = None,
        location: Optional[Location] = None,
        requested_services: Optional[Sequence[str]] = None,
        base_type: Optional[str] = None,
        schema_location: Optional[str] = None,
    ) -> Qualification:
        """
        Create and persist a qualification.

        A legacy location note is migrated into the structured location.

        Raises
        ------
        DuplicateQualificationError
            If a client-supplied id is already taken
        """
        if id and await self._qualification_repo.exists(id):
            raise DuplicateQualificationError(id)

        qualification = Qualification.create(
            type=type,
            id=id,
            state=state,
            description=description,
            effective_qualification_date=effective_qualification_date,
            instant_sync_qualification=instant_sync_qualification,
            provide_alternative=provide_alternative,
            provide_only_available=provide_only_available,
            provide_result_reason=provide_result_reason,
            notes=notes,
            related_parties=related_parties,
            qualification_result=qualification_result,
            location=location,
            requested_services=requested_services,
            base_type=base_type,
            schema_location=schema_location,
        )
        qualification.assign_href(f"{QUALIFICATION_RESOURCE_PATH}/{qualification.id}")

        await self._qualification_repo.save(qualification)
        logger.info(
            "Created qualification %s (location: %s)",
            qualification.id,
            qualification.location.district if qualification.location else "none",
        )
        return qualification
