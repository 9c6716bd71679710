"""Qualification queries - listing, lookup and availability statistics."""

from prodigyhub.application.queries.qualification.get_qualification_query import (
    GetQualificationQuery,
)
from prodigyhub.application.queries.qualification.list_qualifications_query import (
    ListQualificationsQuery,
)
from prodigyhub.application.queries.qualification.location_qualification_stats_query import (
    LocationQualificationStatsQuery,
)

__all__ = [
    "GetQualificationQuery",
    "ListQualificationsQuery",
    "LocationQualificationStatsQuery",
]
