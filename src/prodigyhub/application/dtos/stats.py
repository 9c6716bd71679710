"""Aggregate statistics DTOs."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocationQualificationStats:
    """Availability counts over qualifications that recorded infrastructure."""

    total_qualifications: int
    fiber_available: int
    adsl_available: int
    both_available: int
    neither_available: int
    qualified: int

    @property
    def success_rate(self) -> float:
        if self.total_qualifications == 0:
            return 0.0
        return round(self.qualified / self.total_qualifications * 100, 2)


@dataclass(frozen=True)
class UserStats:
    total_users: int
    active_users: int
    pending_users: int
    unverified_users: int
    users_by_province: dict[str, int] = field(default_factory=dict)
    users_by_district: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AreaStats:
    total_areas: int
    active_areas: int
    planned_areas: int
    areas_by_province: dict[str, int] = field(default_factory=dict)
    areas_by_type: dict[str, int] = field(default_factory=dict)
    fiber_areas: int = 0
    adsl_areas: int = 0
    mobile_areas: int = 0
