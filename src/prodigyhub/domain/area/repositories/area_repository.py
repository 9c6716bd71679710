"""Area repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from prodigyhub.domain.area.entities import Area


class AreaRepository(ABC):
    """Repository interface for Area entities."""

    @abstractmethod
    async def find_by_id(self, area_id: str) -> Optional[Area]:
        """Find an area by its ID."""

    @abstractmethod
    async def find_by_location(self, district: str, province: str) -> Optional[Area]:
        """Find the area registered for a district within a province."""

    @abstractmethod
    async def save(self, area: Area) -> None:
        """Create or update an area."""

    @abstractmethod
    async def delete(self, area_id: str) -> bool:
        """Delete an area. Returns False when nothing was deleted."""

    @abstractmethod
    async def find_all(  # NOQA: PLR0913
        self,
        province: Optional[str] = None,
        district: Optional[str] = None,
        area_type: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = 100,
        offset: int = 0,
    ) -> list[Area]:
        """List areas matching all given filters, newest first (limit None = all)."""

    @abstractmethod
    async def count(self, status: Optional[str] = None) -> int:
        """Count areas, optionally only those with the given status."""

    @abstractmethod
    async def count_by_province(self) -> dict[str, int]:
        """Count areas grouped by province."""

    @abstractmethod
    async def count_by_type(self) -> dict[str, int]:
        """Count areas grouped by area type."""
