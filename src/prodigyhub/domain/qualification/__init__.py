"""Qualification domain - TMF679 CheckProductOfferingQualification.

This domain handles:
- Qualification aggregate (request, location, outcome)
- Infrastructure availability value objects and the provider interface
- Evaluation of requested services against availability
- Reading the legacy ``SLT_LOCATION:`` note encoding
"""

from prodigyhub.domain.qualification.aggregates import (
    DEFAULT_QUALIFICATION_TYPE,
    Qualification,
)
from prodigyhub.domain.qualification.exceptions import (
    DuplicateQualificationError,
    InvalidLocationError,
    QualificationNotFoundError,
)
from prodigyhub.domain.qualification.repositories import QualificationRepository
from prodigyhub.domain.qualification.services import (
    URBAN_DISTRICTS,
    InfrastructureProvider,
    QualificationEvaluation,
    QualificationEvaluator,
    find_location_note,
    format_area_match_note,
    format_infrastructure_note,
    format_location_note,
    format_services_note,
    parse_location_note,
)
from prodigyhub.domain.qualification.value_objects import (
    AREA_MATCH_NOTE_PREFIX,
    INFRASTRUCTURE_NOTE_PREFIX,
    LOCATION_NOTE_PREFIX,
    NOT_AVAILABLE,
    SERVICES_NOTE_PREFIX,
    SYSTEM_NOTE_AUTHOR,
    AdslAvailability,
    AlternativeOption,
    FiberAvailability,
    InfrastructureAvailability,
    Location,
    MobileAvailability,
    Note,
    QualificationResult,
    QualificationState,
    RelatedParty,
)

__all__ = [
    "AREA_MATCH_NOTE_PREFIX",
    "AdslAvailability",
    "AlternativeOption",
    "DEFAULT_QUALIFICATION_TYPE",
    "DuplicateQualificationError",
    "FiberAvailability",
    "INFRASTRUCTURE_NOTE_PREFIX",
    "InfrastructureAvailability",
    "InfrastructureProvider",
    "InvalidLocationError",
    "LOCATION_NOTE_PREFIX",
    "Location",
    "MobileAvailability",
    "NOT_AVAILABLE",
    "Note",
    "Qualification",
    "QualificationEvaluation",
    "QualificationEvaluator",
    "QualificationNotFoundError",
    "QualificationRepository",
    "QualificationResult",
    "QualificationState",
    "RelatedParty",
    "SERVICES_NOTE_PREFIX",
    "SYSTEM_NOTE_AUTHOR",
    "URBAN_DISTRICTS",
    "find_location_note",
    "format_area_match_note",
    "format_infrastructure_note",
    "format_location_note",
    "format_services_note",
    "parse_location_note",
]
