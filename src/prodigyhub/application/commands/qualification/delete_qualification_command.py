"""Delete a CheckProductOfferingQualification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prodigyhub.domain.qualification import (
    QualificationNotFoundError,
    QualificationRepository,
)

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class DeleteQualificationCommand:
    def __init__(self, qualification_repo: QualificationRepository):
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteQualificationCommand:
        return cls(qualification_repo=factory.qualification_repository())

    async def execute(self, qualification_id: str) -> None:
        deleted = await self._qualification_repo.delete(qualification_id)
        if not deleted:
            raise QualificationNotFoundError(qualification_id)
