"""Application DTOs."""

from prodigyhub.application.dtos.address_sync import (
    AddressSyncResult,
    AddressSyncStatus,
    format_percentage,
)
from prodigyhub.application.dtos.stats import (
    AreaStats,
    LocationQualificationStats,
    UserStats,
)

__all__ = [
    "AddressSyncResult",
    "AddressSyncStatus",
    "AreaStats",
    "LocationQualificationStats",
    "UserStats",
    "format_percentage",
]
