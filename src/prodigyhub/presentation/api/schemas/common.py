"""Common schemas shared across API endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from prodigyhub.domain.qualification import (
    NOT_AVAILABLE,
    AdslAvailability,
    FiberAvailability,
    InfrastructureAvailability,
    MobileAvailability,
)
from prodigyhub.domain.shared.time import utc_now


class CamelModel(BaseModel):
    """Base schema with camelCase JSON keys (TMF style)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: Optional[str] = Field(None, description="Error code for programmatic handling")
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the error occurred",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User not found", "code": "USER_NOT_FOUND"},
        },
    )


class FiberSchema(CamelModel):
    available: bool = False
    technology: str = NOT_AVAILABLE
    max_speed: str = NOT_AVAILABLE
    coverage: str = "none"
    installation_time: Optional[str] = None
    monthly_fee: Optional[int] = None

    @field_validator("coverage", mode="before")
    @classmethod
    def _coverage_as_text(cls, v: Any) -> str:
        # Older clients send a percentage number
        return str(v) if v is not None else "none"


class AdslSchema(CamelModel):
    available: bool = False
    technology: str = NOT_AVAILABLE
    max_speed: str = NOT_AVAILABLE
    line_quality: str = "poor"
    distance_from_exchange: Optional[int] = None
    monthly_fee: Optional[int] = None


class MobileSchema(CamelModel):
    available: bool = True
    technologies: list[str] = Field(default_factory=lambda: ["4G"])
    coverage: str = "Good"
    signal_strength: Optional[str] = None


class InfrastructureSchema(CamelModel):
    """Fiber, ADSL and mobile availability at a location."""

    fiber: FiberSchema = Field(default_factory=FiberSchema)
    adsl: AdslSchema = Field(default_factory=AdslSchema)
    mobile: MobileSchema = Field(default_factory=MobileSchema)

    @classmethod
    def from_domain(cls, infrastructure: InfrastructureAvailability) -> "InfrastructureSchema":
        return cls.model_validate(infrastructure.to_dict())

    def to_domain(self) -> InfrastructureAvailability:
        return InfrastructureAvailability(
            fiber=FiberAvailability(
                available=self.fiber.available,
                technology=self.fiber.technology,
                max_speed=self.fiber.max_speed,
                coverage=self.fiber.coverage,
                installation_time=self.fiber.installation_time,
                monthly_fee=self.fiber.monthly_fee,
            ),
            adsl=AdslAvailability(
                available=self.adsl.available,
                technology=self.adsl.technology,
                max_speed=self.adsl.max_speed,
                line_quality=self.adsl.line_quality,
                distance_from_exchange=self.adsl.distance_from_exchange,
                monthly_fee=self.adsl.monthly_fee,
            ),
            mobile=MobileAvailability(
                available=self.mobile.available,
                technologies=tuple(self.mobile.technologies),
                coverage=self.mobile.coverage,
                signal_strength=self.mobile.signal_strength,
            ),
        )
