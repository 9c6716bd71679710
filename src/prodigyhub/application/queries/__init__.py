"""Query layer. Read-only operations for retrieving data."""

from prodigyhub.application.queries.address_sync import AddressSyncStatusQuery
from prodigyhub.application.queries.area import (
    AreaStatsQuery,
    GetAreaQuery,
    ListAreasQuery,
)
from prodigyhub.application.queries.qualification import (
    GetQualificationQuery,
    ListQualificationsQuery,
    LocationQualificationStatsQuery,
)
from prodigyhub.application.queries.user import (
    GetUserQuery,
    ListUsersQuery,
    UserStatsQuery,
)

__all__ = [
    "AddressSyncStatusQuery",
    "AreaStatsQuery",
    "GetAreaQuery",
    "GetQualificationQuery",
    "ListAreasQuery",
    "ListQualificationsQuery",
    "ListUsersQuery",
    "LocationQualificationStatsQuery",
    "UserStatsQuery",
]
