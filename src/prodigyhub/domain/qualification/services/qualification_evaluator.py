"""Derive a qualification outcome from infrastructure availability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from prodigyhub.domain.qualification.value_objects import (
    AlternativeOption,
    InfrastructureAvailability,
    QualificationResult,
)

DEFAULT_FIBER_FEE = 2500
DEFAULT_ADSL_FEE = 1500
MOBILE_BROADBAND_FEE = 1800
MOBILE_BROADBAND_SPEED = "25 Mbps"

DEFAULT_FIBER_INSTALLATION_TIME = "3-5 business days"
ADSL_INSTALLATION_TIME = "1-2 business days"
UNKNOWN_INSTALLATION_TIME = "Installation time varies"


@dataclass(frozen=True)
class QualificationEvaluation:
    """Outcome of evaluating requested services at one location."""

    result: QualificationResult
    estimated_installation_time: str
    alternative_options: list[AlternativeOption] = field(default_factory=list)


class QualificationEvaluator:
    """Decide whether requested services can be provided.

    The decision order is fixed: a requested fiber or ADSL service whose
    technology is available makes the request ``qualified``; otherwise any
    available fixed line makes it ``conditional``; else ``unqualified``.
    Service names match by case-insensitive substring ("Fiber 100M" asks
    for fiber).
    """

    def evaluate(
        self,
        requested_services: Iterable[str],
        infrastructure: InfrastructureAvailability,
        include_alternatives: bool = False,
    ) -> QualificationEvaluation:
        services = [s.lower() for s in requested_services]
        alternatives = (
            self.alternatives_for(infrastructure) if include_alternatives else []
        )
        return QualificationEvaluation(
            result=self.determine_result(services, infrastructure),
            estimated_installation_time=self.installation_time_for(infrastructure),
            alternative_options=alternatives,
        )

    @staticmethod
    def determine_result(
        requested_services: Iterable[str],
        infrastructure: InfrastructureAvailability,
    ) -> QualificationResult:
        services = [s.lower() for s in requested_services]
        fiber_requested = any("fiber" in s for s in services)
        adsl_requested = any("adsl" in s for s in services)

        if fiber_requested and infrastructure.fiber.available:
            return QualificationResult.QUALIFIED
        if adsl_requested and infrastructure.adsl.available:
            return QualificationResult.QUALIFIED
        if infrastructure.has_fixed_line:
            return QualificationResult.CONDITIONAL
        return QualificationResult.UNQUALIFIED

    @staticmethod
    def alternatives_for(
        infrastructure: InfrastructureAvailability,
    ) -> list[AlternativeOption]:
        alternatives: list[AlternativeOption] = []

        fiber = infrastructure.fiber
        if fiber.available:
            alternatives.append(
                AlternativeOption(
                    service="Fiber Broadband",
                    technology=fiber.technology,
                    speed=fiber.max_speed,
                    monthly_fee=fiber.monthly_fee or DEFAULT_FIBER_FEE,
                ),
            )

        adsl = infrastructure.adsl
        if adsl.available:
            alternatives.append(
                AlternativeOption(
                    service="ADSL Broadband",
                    technology=adsl.technology,
                    speed=adsl.max_speed,
                    monthly_fee=adsl.monthly_fee or DEFAULT_ADSL_FEE,
                ),
            )

        mobile = infrastructure.mobile
        if mobile.available:
            alternatives.append(
                AlternativeOption(
                    service="Mobile Broadband",
                    technology="/".join(mobile.technologies),
                    speed=MOBILE_BROADBAND_SPEED,
                    monthly_fee=MOBILE_BROADBAND_FEE,
                ),
            )

        return alternatives

    @staticmethod
    def installation_time_for(infrastructure: InfrastructureAvailability) -> str:
        if infrastructure.fiber.available:
            fiber_time = infrastructure.fiber.installation_time
            return fiber_time or DEFAULT_FIBER_INSTALLATION_TIME
        if infrastructure.adsl.available:
            return ADSL_INSTALLATION_TIME
        return UNKNOWN_INSTALLATION_TIME
