"""Partially update a CheckProductOfferingQualification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from prodigyhub.domain.qualification import (
    Qualification,
    QualificationNotFoundError,
    QualificationRepository,
)

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class UpdateQualificationCommand:
    """Apply a PATCH to an existing qualification."""

    def __init__(self, qualification_repo: QualificationRepository):
        self._qualification_repo = qualification_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateQualificationCommand:
        return cls(qualification_repo=factory.qualification_repository())

    async def execute(self, qualification_id: str, **changes: Any) -> Qualification:
        """
        Update the given attributes; omitted (None) ones stay unchanged.

        ``changes`` takes the keyword arguments of ``Qualification.update``.

        Raises
        ------
        QualificationNotFoundError
            If no qualification has the given id
        """
        qualification = await self._qualification_repo.find_by_id(qualification_id)
        if qualification is None:
            raise QualificationNotFoundError(qualification_id)

        qualification.update(**changes)
        await self._qualification_repo.save(qualification)
        return qualification
