from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.domain.qualification import (
    Qualification,
    QualificationNotFoundError,
    QualificationRepository,
)

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class GetQualificationQuery:
    def __init__(self, qualification_repo: QualificationRepository):
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetQualificationQuery:
        return cls(qualification_repo=factory.qualification_repository())

    async def execute(self, qualification_id: str) -> Qualification:
        qualification = await self._qualification_repo.find_by_id(qualification_id)
        if qualification is None:
            raise QualificationNotFoundError(qualification_id)
        return qualification
