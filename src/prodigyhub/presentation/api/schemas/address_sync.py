"""Address sync schemas for API request/response models."""

from typing import Optional

from pydantic import Field

from prodigyhub.application.dtos import AddressSyncResult, AddressSyncStatus
from prodigyhub.presentation.api.schemas.common import CamelModel
from prodigyhub.presentation.api.schemas.users import AddressSchema


class AddressSyncStatsResponse(CamelModel):
    """Counts of one batch sync run."""

    total_qualifications: int = Field(..., description="Records considered")
    synced_count: int = Field(..., description="Addresses written")
    error_count: int = Field(..., description="Records skipped or failed")
    success_rate: str = Field(..., description='e.g. "66.67%"; "0%" when empty')
    heuristic_matches: int = Field(
        ...,
        description="Synced records whose user was guessed, not matched by email",
    )

    @classmethod
    def from_dto(cls, result: AddressSyncResult) -> "AddressSyncStatsResponse":
        return cls(
            total_qualifications=result.total_qualifications,
            synced_count=result.synced_count,
            error_count=result.error_count,
            success_rate=result.success_rate,
            heuristic_matches=result.heuristic_matches,
        )


class AddressSyncResponse(CamelModel):
    success: bool
    message: str
    stats: AddressSyncStatsResponse

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "Address sync completed",
                "stats": {
                    "totalQualifications": 3,
                    "syncedCount": 2,
                    "errorCount": 1,
                    "successRate": "66.67%",
                    "heuristicMatches": 1,
                },
            },
        },
    }


class AddressSyncStatusResponse(CamelModel):
    total_users: int
    users_with_address: int
    users_without_address: int
    qualifications_with_location: int
    sync_percentage: str

    @classmethod
    def from_dto(cls, status: AddressSyncStatus) -> "AddressSyncStatusResponse":
        return cls(
            total_users=status.total_users,
            users_with_address=status.users_with_address,
            users_without_address=status.users_without_address,
            qualifications_with_location=status.qualifications_with_location,
            sync_percentage=status.sync_percentage,
        )


class SyncedUserResponse(CamelModel):
    email: str
    address: Optional[AddressSchema] = None


class UserAddressSyncResponse(CamelModel):
    success: bool
    message: str
    user: SyncedUserResponse
