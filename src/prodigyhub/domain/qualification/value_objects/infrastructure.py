"""Infrastructure availability at a location.

The dictionaries produced by ``to_dict`` use the camelCase keys of the
public API and are stored as-is in JSON columns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class FiberAvailability:
    available: bool
    technology: str = NOT_AVAILABLE
    max_speed: str = NOT_AVAILABLE
    coverage: str = "none"
    installation_time: Optional[str] = None
    monthly_fee: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.available,
            "technology": self.technology,
            "maxSpeed": self.max_speed,
            "coverage": self.coverage,
            "installationTime": self.installation_time,
            "monthlyFee": self.monthly_fee,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FiberAvailability:
        return cls(
            available=bool(data.get("available", False)),
            technology=data.get("technology") or NOT_AVAILABLE,
            max_speed=data.get("maxSpeed") or NOT_AVAILABLE,
            coverage=str(data.get("coverage") or "none"),
            installation_time=data.get("installationTime"),
            monthly_fee=data.get("monthlyFee"),
        )


@dataclass(frozen=True)
class AdslAvailability:
    available: bool
    technology: str = NOT_AVAILABLE
    max_speed: str = NOT_AVAILABLE
    line_quality: str = "poor"
    distance_from_exchange: Optional[int] = None
    monthly_fee: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.available,
            "technology": self.technology,
            "maxSpeed": self.max_speed,
            "lineQuality": self.line_quality,
            "distanceFromExchange": self.distance_from_exchange,
            "monthlyFee": self.monthly_fee,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AdslAvailability:
        return cls(
            available=bool(data.get("available", False)),
            technology=data.get("technology") or NOT_AVAILABLE,
            max_speed=data.get("maxSpeed") or NOT_AVAILABLE,
            line_quality=data.get("lineQuality") or "poor",
            distance_from_exchange=data.get("distanceFromExchange"),
            monthly_fee=data.get("monthlyFee"),
        )


@dataclass(frozen=True)
class MobileAvailability:
    available: bool = True
    technologies: tuple[str, ...] = ("4G",)
    coverage: str = "Good"
    signal_strength: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.available,
            "technologies": list(self.technologies),
            "coverage": self.coverage,
            "signalStrength": self.signal_strength,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MobileAvailability:
        return cls(
            available=bool(data.get("available", True)),
            technologies=tuple(data.get("technologies") or ()),
            coverage=data.get("coverage") or "Good",
            signal_strength=data.get("signalStrength"),
        )


@dataclass(frozen=True)
class InfrastructureAvailability:
    """Fiber, ADSL and mobile availability for one location."""

    fiber: FiberAvailability
    adsl: AdslAvailability
    mobile: MobileAvailability = field(default_factory=MobileAvailability)

    @property
    def has_fixed_line(self) -> bool:
        return self.fiber.available or self.adsl.available

    def to_dict(self) -> dict[str, Any]:
        return {
            "fiber": self.fiber.to_dict(),
            "adsl": self.adsl.to_dict(),
            "mobile": self.mobile.to_dict(),
        }

    @classmethod
    def from_dict(
        cls,
        data: Optional[dict[str, Any]],
    ) -> Optional[InfrastructureAvailability]:
        if not data:
            return None
        return cls(
            fiber=FiberAvailability.from_dict(data.get("fiber") or {}),
            adsl=AdslAvailability.from_dict(data.get("adsl") or {}),
            mobile=MobileAvailability.from_dict(data.get("mobile") or {}),
        )


@dataclass(frozen=True)
class AlternativeOption:
    """A service the customer could order instead of the requested one."""

    service: str
    technology: str
    speed: str
    monthly_fee: int
    availability: str = "Available"

    def to_dict(self) -> dict[str, Any]:
        return {
            "service": self.service,
            "technology": self.technology,
            "speed": self.speed,
            "monthlyFee": self.monthly_fee,
            "availability": self.availability,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AlternativeOption:
        return cls(
            service=data.get("service", ""),
            technology=data.get("technology", ""),
            speed=data.get("speed", ""),
            monthly_fee=int(data.get("monthlyFee") or 0),
            availability=data.get("availability", "Available"),
        )
