"""Randomized infrastructure availability for demos and tests.

There is no real provisioning data source behind this provider. Results
are drawn per call, weighted by whether the district is urban, so two
checks of the same location can disagree.
"""

import logging
import random
from typing import Optional

from prodigyhub.domain.qualification import (
    URBAN_DISTRICTS,
    AdslAvailability,
    FiberAvailability,
    InfrastructureAvailability,
    InfrastructureProvider,
    Location,
    MobileAvailability,
)

logger = logging.getLogger(__name__)

URBAN_FIBER_PROBABILITY = 0.7
RURAL_FIBER_PROBABILITY = 0.3
ADSL_PROBABILITY = 0.85

FIBER_INSTALLATION_TIME = "3-5 business days"
LINE_QUALITIES = ("excellent", "good", "fair")
MIN_EXCHANGE_DISTANCE = 500
MAX_EXCHANGE_DISTANCE = 3000


class RandomInfrastructureProvider(InfrastructureProvider):
    """Generate plausible availability from district heuristics.

    Parameters
    ----------
    rng
        Random source. Pass a seeded ``random.Random`` for repeatable
        results; defaults to a fresh unseeded instance.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()  # NOQA: S311

    @property
    def name(self) -> str:
        return "random"

    async def get_availability(
        self,
        location: Location,
    ) -> InfrastructureAvailability:
        is_urban = location.district in URBAN_DISTRICTS
        is_western = location.province == "Western"

        availability = InfrastructureAvailability(
            fiber=self._fiber(is_urban, is_western),
            adsl=self._adsl(is_urban),
            mobile=self._mobile(is_urban),
        )
        logger.debug(
            "Generated availability for %s/%s: fiber=%s adsl=%s",
            location.district,
            location.province,
            availability.fiber.available,
            availability.adsl.available,
        )
        return availability

    def _fiber(self, is_urban: bool, is_western: bool) -> FiberAvailability:
        probability = URBAN_FIBER_PROBABILITY if is_urban else RURAL_FIBER_PROBABILITY
        if self._rng.random() >= probability:
            return FiberAvailability(available=False)

        return FiberAvailability(
            available=True,
            technology="FTTH",
            max_speed="100 Mbps" if is_western else "50 Mbps",
            coverage="full",
            installation_time=FIBER_INSTALLATION_TIME,
            monthly_fee=2500 if is_western else 2000,
        )

    def _adsl(self, is_urban: bool) -> AdslAvailability:
        if self._rng.random() >= ADSL_PROBABILITY:
            return AdslAvailability(available=False)

        return AdslAvailability(
            available=True,
            technology="ADSL2+",
            max_speed="16 Mbps" if is_urban else "8 Mbps",
            line_quality=self._rng.choice(LINE_QUALITIES),
            distance_from_exchange=self._rng.randrange(
                MIN_EXCHANGE_DISTANCE,
                MAX_EXCHANGE_DISTANCE,
            ),
            monthly_fee=1500,
        )

    @staticmethod
    def _mobile(is_urban: bool) -> MobileAvailability:
        if is_urban:
            return MobileAvailability(
                available=True,
                technologies=("4G", "5G"),
                coverage="Excellent",
                signal_strength="excellent",
            )
        return MobileAvailability(
            available=True,
            technologies=("4G",),
            coverage="Good",
            signal_strength="good",
        )
