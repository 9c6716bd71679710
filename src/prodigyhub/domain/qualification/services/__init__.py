from prodigyhub.domain.qualification.services.infrastructure_provider import (
    URBAN_DISTRICTS,
    InfrastructureProvider,
)
from prodigyhub.domain.qualification.services.location_note import (
    find_location_note,
    format_area_match_note,
    format_infrastructure_note,
    format_location_note,
    format_services_note,
    parse_location_note,
)
from prodigyhub.domain.qualification.services.qualification_evaluator import (
    QualificationEvaluation,
    QualificationEvaluator,
)

__all__ = [
    "InfrastructureProvider",
    "QualificationEvaluation",
    "QualificationEvaluator",
    "URBAN_DISTRICTS",
    "find_location_note",
    "format_area_match_note",
    "format_infrastructure_note",
    "format_location_note",
    "format_services_note",
    "parse_location_note",
]
