from datetime import datetime
from typing import Optional, Union
from uuid import uuid4

from prodigyhub.domain.area.value_objects import AreaStatus, AreaType
from prodigyhub.domain.qualification.value_objects import (
    AdslAvailability,
    FiberAvailability,
    InfrastructureAvailability,
)
from prodigyhub.domain.shared.time import utc_now


def _no_infrastructure() -> InfrastructureAvailability:
    return InfrastructureAvailability(
        fiber=FiberAvailability(available=False),
        adsl=AdslAvailability(available=False),
    )


class Area:
    """
    A serviced area: one district within a province.

    Holds the infrastructure recorded for the district. At most one area
    exists per (district, province) pair.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        district: str,
        province: str,
        area_type: Union[str, AreaType] = AreaType.SUBURBAN,
        status: Union[str, AreaStatus] = AreaStatus.ACTIVE,
        infrastructure: Optional[InfrastructureAvailability] = None,
        postal_code: Optional[str] = None,
        description: Optional[str] = None,
        created_by: str = "system",
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or str(uuid4())
        self._name = name.strip()
        self._district = district.strip()
        self._province = province.strip()
        self._area_type = AreaType(area_type)
        self._status = AreaStatus(status)
        self._infrastructure = infrastructure or _no_infrastructure()
        self._postal_code = postal_code
        self._description = description
        self._created_by = created_by
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def district(self) -> str:
        return self._district

    @property
    def province(self) -> str:
        return self._province

    @property
    def area_type(self) -> AreaType:
        return self._area_type

    @property
    def status(self) -> AreaStatus:
        return self._status

    @property
    def infrastructure(self) -> InfrastructureAvailability:
        return self._infrastructure

    @property
    def postal_code(self) -> Optional[str]:
        return self._postal_code

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(  # NOQA: PLR0913
        self,
        name: Optional[str] = None,
        district: Optional[str] = None,
        province: Optional[str] = None,
        area_type: Optional[Union[str, AreaType]] = None,
        status: Optional[Union[str, AreaStatus]] = None,
        infrastructure: Optional[InfrastructureAvailability] = None,
        postal_code: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        if name is not None:
            self._name = name.strip()
        if district is not None:
            self._district = district.strip()
        if province is not None:
            self._province = province.strip()
        if area_type is not None:
            self._area_type = AreaType(area_type)
        if status is not None:
            self._status = AreaStatus(status)
        if infrastructure is not None:
            self._infrastructure = infrastructure
        if postal_code is not None:
            self._postal_code = postal_code
        if description is not None:
            self._description = description
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Area(id={self._id}, district={self._district}, province={self._province})"
