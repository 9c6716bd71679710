"""Qualification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from prodigyhub.domain.qualification.aggregates.qualification import Qualification


class QualificationRepository(ABC):
    """Repository interface for Qualification aggregates."""

    @abstractmethod
    async def find_by_id(self, qualification_id: str) -> Optional[Qualification]:
        """Find a qualification by its TMF id."""

    @abstractmethod
    async def exists(self, qualification_id: str) -> bool:
        """Check whether a qualification with this id is stored."""

    @abstractmethod
    async def save(self, qualification: Qualification) -> None:
        """Create or update a qualification, including its notes."""

    @abstractmethod
    async def delete(self, qualification_id: str) -> bool:
        """Delete a qualification. Returns False when nothing was deleted."""

    @abstractmethod
    async def find_all(
        self,
        state: Optional[str] = None,
        qualification_result: Optional[str] = None,
        created_since: Optional[datetime] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Qualification]:
        """
        List qualifications, newest first.

        Parameters
        ----------
        state
            Only qualifications in this state
        qualification_result
            Only qualifications with this result
        created_since
            Only qualifications with a creation date on or after this
        limit
            Maximum number of results (None = no limit)
        offset
            Number of results to skip
        """

    @abstractmethod
    async def find_with_location(self, limit: int) -> list[Qualification]:
        """
        Return qualifications that carry a location, oldest first.

        A qualification carries a location when its structured location has
        a district, or one of its notes starts with ``SLT_LOCATION:``.

        Parameters
        ----------
        limit
            Maximum number of qualifications to return
        """

    @abstractmethod
    async def count_with_location(self) -> int:
        """Count qualifications that carry a location (see find_with_location)."""

    @abstractmethod
    async def find_with_infrastructure(self) -> list[Qualification]:
        """Return qualifications that recorded an infrastructure check."""
