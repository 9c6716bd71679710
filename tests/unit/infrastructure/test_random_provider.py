"""Unit tests for RandomInfrastructureProvider."""

import random

import pytest

from prodigyhub.domain.qualification import NOT_AVAILABLE, Location
from prodigyhub.infrastructure.providers import RandomInfrastructureProvider

COLOMBO = Location(address="1 Galle Rd", district="Colombo", province="Western")
ANURADHAPURA = Location(
    address="3 Main St",
    district="Anuradhapura",
    province="North Central",
)


class _FixedRandom(random.Random):
    """Random source whose ``random()`` always returns one value."""

    def __init__(self, value: float):
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


class TestRandomInfrastructureProvider:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("seed", range(20))
    async def test_mobile_always_available(self, seed):
        provider = RandomInfrastructureProvider(random.Random(seed))

        for location in (COLOMBO, ANURADHAPURA):
            availability = await provider.get_availability(location)
            assert availability.mobile.available is True
            assert "4G" in availability.mobile.technologies

    @pytest.mark.asyncio
    async def test_5g_only_in_urban_districts(self):
        provider = RandomInfrastructureProvider(random.Random(1))

        urban = await provider.get_availability(COLOMBO)
        rural = await provider.get_availability(ANURADHAPURA)

        assert urban.mobile.technologies == ("4G", "5G")
        assert rural.mobile.technologies == ("4G",)

    @pytest.mark.asyncio
    async def test_urban_fiber_probability_above_rural(self):
        """A draw of 0.5 gives fiber in urban districts only."""
        provider = RandomInfrastructureProvider(_FixedRandom(0.5))

        urban = await provider.get_availability(COLOMBO)
        rural = await provider.get_availability(ANURADHAPURA)

        assert urban.fiber.available is True
        assert rural.fiber.available is False
        assert rural.fiber.technology == NOT_AVAILABLE

    @pytest.mark.asyncio
    async def test_western_province_gets_faster_fiber(self):
        provider = RandomInfrastructureProvider(_FixedRandom(0.0))
        kandy = Location(address="7 Temple Rd", district="Kandy", province="Central")

        western = await provider.get_availability(COLOMBO)
        central = await provider.get_availability(kandy)

        assert (western.fiber.max_speed, western.fiber.monthly_fee) == ("100 Mbps", 2500)
        assert (central.fiber.max_speed, central.fiber.monthly_fee) == ("50 Mbps", 2000)

    @pytest.mark.asyncio
    async def test_nothing_fixed_on_high_draw(self):
        provider = RandomInfrastructureProvider(_FixedRandom(0.99))

        availability = await provider.get_availability(COLOMBO)

        assert availability.has_fixed_line is False

    @pytest.mark.asyncio
    async def test_adsl_details(self):
        provider = RandomInfrastructureProvider(_FixedRandom(0.0))

        availability = await provider.get_availability(ANURADHAPURA)

        assert availability.adsl.available is True
        assert availability.adsl.max_speed == "8 Mbps"
        assert 500 <= availability.adsl.distance_from_exchange < 3000

    def test_name(self):
        assert RandomInfrastructureProvider().name == "random"
