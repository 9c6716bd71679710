"""List CheckProductOfferingQualification records."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from prodigyhub.domain.qualification import Qualification, QualificationRepository

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class ListQualificationsQuery:
    """Query to list qualifications with TMF filters, newest first."""

    def __init__(self, qualification_repo: QualificationRepository):
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListQualificationsQuery:
        return cls(qualification_repo=factory.qualification_repository())

    async def execute(  # NOQA: PLR0913
        self,
        state: Optional[str] = None,
        qualification_result: Optional[str] = None,
        created_since: Optional[datetime] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Qualification]:
        return await self._qualification_repo.find_all(
            state=state,
            qualification_result=qualification_result,
            created_since=created_since,
            limit=limit,
            offset=offset,
        )
