"""Unit tests for AreaInfrastructureProvider."""

from unittest.mock import AsyncMock, Mock

import pytest

from prodigyhub.domain.area import Area
from prodigyhub.domain.qualification import InfrastructureProvider, Location
from prodigyhub.infrastructure.providers import AreaInfrastructureProvider
from tests.shared.fixtures.factories import infrastructure

KANDY = Location(address="7 Temple Rd", district="Kandy", province="Central")


class TestAreaInfrastructureProvider:
    def setup_method(self):
        self.area_repo = AsyncMock()
        self.fallback = Mock(spec=InfrastructureProvider)
        self.fallback.name = "random"
        self.fallback.get_availability = AsyncMock(
            return_value=infrastructure(fiber=False, adsl=False),
        )
        self.provider = AreaInfrastructureProvider(self.area_repo, self.fallback)

    @pytest.mark.asyncio
    async def test_uses_stored_area(self):
        stored = infrastructure(fiber=True, adsl=False)
        self.area_repo.find_by_location.return_value = Area(
            name="Kandy",
            district="Kandy",
            province="Central",
            infrastructure=stored,
        )

        availability = await self.provider.get_availability(KANDY)

        assert availability == stored
        self.area_repo.find_by_location.assert_awaited_once_with("Kandy", "Central")
        self.fallback.get_availability.assert_not_called()

    @pytest.mark.asyncio
    async def test_falls_back_without_area(self):
        self.area_repo.find_by_location.return_value = None

        availability = await self.provider.get_availability(KANDY)

        assert availability.has_fixed_line is False
        self.fallback.get_availability.assert_awaited_once_with(KANDY)

    def test_name(self):
        assert self.provider.name == "area"
