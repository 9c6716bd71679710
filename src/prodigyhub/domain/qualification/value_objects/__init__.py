from prodigyhub.domain.qualification.value_objects.infrastructure import (
    NOT_AVAILABLE,
    AdslAvailability,
    AlternativeOption,
    FiberAvailability,
    InfrastructureAvailability,
    MobileAvailability,
)
from prodigyhub.domain.qualification.value_objects.location import Location
from prodigyhub.domain.qualification.value_objects.note import (
    AREA_MATCH_NOTE_PREFIX,
    INFRASTRUCTURE_NOTE_PREFIX,
    LOCATION_NOTE_PREFIX,
    SERVICES_NOTE_PREFIX,
    SYSTEM_NOTE_AUTHOR,
    Note,
)
from prodigyhub.domain.qualification.value_objects.qualification_result import (
    QualificationResult,
    QualificationState,
)
from prodigyhub.domain.qualification.value_objects.related_party import (
    RelatedParty,
)

__all__ = [
    "AREA_MATCH_NOTE_PREFIX",
    "AdslAvailability",
    "AlternativeOption",
    "FiberAvailability",
    "INFRASTRUCTURE_NOTE_PREFIX",
    "InfrastructureAvailability",
    "LOCATION_NOTE_PREFIX",
    "Location",
    "MobileAvailability",
    "NOT_AVAILABLE",
    "Note",
    "QualificationResult",
    "QualificationState",
    "RelatedParty",
    "SERVICES_NOTE_PREFIX",
    "SYSTEM_NOTE_AUTHOR",
]
