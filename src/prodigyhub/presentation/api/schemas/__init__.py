"""Pydantic schemas for API request/response models."""

from prodigyhub.presentation.api.schemas.address_sync import (
    AddressSyncResponse,
    AddressSyncStatsResponse,
    AddressSyncStatusResponse,
    SyncedUserResponse,
    UserAddressSyncResponse,
)
from prodigyhub.presentation.api.schemas.areas import (
    AreaCreateRequest,
    AreaDeleteResponse,
    AreaResponse,
    AreaStatsResponse,
    AreaUpdateRequest,
)
from prodigyhub.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    InfrastructureSchema,
)
from prodigyhub.presentation.api.schemas.qualifications import (
    LocationQualificationRequest,
    LocationQualificationStatsResponse,
    LocationSchema,
    NoteSchema,
    QualificationCreateRequest,
    QualificationDeleteResponse,
    QualificationResponse,
    QualificationUpdateRequest,
    RelatedPartySchema,
)
from prodigyhub.presentation.api.schemas.users import (
    AddressSchema,
    UserCreateRequest,
    UserDeleteResponse,
    UserResponse,
    UserStatsResponse,
    UserUpdateRequest,
)

__all__ = [
    # Address sync
    "AddressSyncResponse",
    "AddressSyncStatsResponse",
    "AddressSyncStatusResponse",
    "SyncedUserResponse",
    "UserAddressSyncResponse",
    # Areas
    "AreaCreateRequest",
    "AreaDeleteResponse",
    "AreaResponse",
    "AreaStatsResponse",
    "AreaUpdateRequest",
    # Common
    "CamelModel",
    "ErrorResponse",
    "InfrastructureSchema",
    # Qualifications
    "LocationQualificationRequest",
    "LocationQualificationStatsResponse",
    "LocationSchema",
    "NoteSchema",
    "QualificationCreateRequest",
    "QualificationDeleteResponse",
    "QualificationResponse",
    "QualificationUpdateRequest",
    "RelatedPartySchema",
    # Users
    "AddressSchema",
    "UserCreateRequest",
    "UserDeleteResponse",
    "UserResponse",
    "UserStatsResponse",
    "UserUpdateRequest",
]
