"""Infrastructure provider interface."""

from abc import ABC, abstractmethod

from prodigyhub.domain.qualification.value_objects import (
    InfrastructureAvailability,
    Location,
)

# Districts treated as urban by the availability heuristics
URBAN_DISTRICTS = frozenset({"Colombo", "Gampaha", "Kandy", "Galle", "Matara"})


class InfrastructureProvider(ABC):
    """Abstract source of fiber/ADSL/mobile availability for a location."""

    @abstractmethod
    async def get_availability(
        self,
        location: Location,
    ) -> InfrastructureAvailability:
        """
        Determine which access technologies can serve a location.

        Parameters
        ----------
        location
            Location with at least district and province set

        Returns
        -------
        InfrastructureAvailability for fiber, ADSL and mobile.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Identifier of the data source.

        Used for logging and stored with area-match notes so a record
        shows where its availability came from.
        """
