"""User schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from prodigyhub.application.dtos import UserStats
from prodigyhub.domain.user import Address, User, UserStatus
from prodigyhub.presentation.api.schemas.common import CamelModel


class AddressSchema(CamelModel):
    """Postal address. Street, city, district and province are required."""

    street: str = ""
    city: str = ""
    district: str = ""
    province: str = ""
    postal_code: str = ""

    @classmethod
    def from_domain(cls, address: Optional[Address]) -> Optional["AddressSchema"]:
        if address is None:
            return None
        return cls(
            street=address.street,
            city=address.city,
            district=address.district,
            province=address.province,
            postal_code=address.postal_code,
        )

    def to_domain(self) -> Address:
        return Address(
            street=self.street,
            city=self.city,
            district=self.district,
            province=self.province,
            postal_code=self.postal_code,
        )


class UserCreateRequest(CamelModel):
    """Request schema for signup."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone_number: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8, max_length=72)
    status: UserStatus = UserStatus.UNVERIFIED
    address: Optional[AddressSchema] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "firstName": "Nimal",
                "lastName": "Perera",
                "email": "nimal@example.lk",
                "phoneNumber": "+94771234567",
                "password": "a-strong-password",
            },
        },
    }


class UserUpdateRequest(CamelModel):
    """Partial profile update. Omitted fields stay unchanged."""

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone_number: Optional[str] = None
    password: Optional[str] = Field(None, min_length=8, max_length=72)
    status: Optional[UserStatus] = None
    address: Optional[AddressSchema] = None


class UserResponse(CamelModel):
    """A user without credentials."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: str
    status: UserStatus
    address: Optional[AddressSchema] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone_number=user.phone_number,
            status=user.status,
            address=AddressSchema.from_domain(user.address),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserStatsResponse(CamelModel):
    total_users: int
    active_users: int
    pending_users: int
    unverified_users: int
    users_by_province: dict[str, int]
    users_by_district: dict[str, int]

    @classmethod
    def from_dto(cls, stats: UserStats) -> "UserStatsResponse":
        return cls(
            total_users=stats.total_users,
            active_users=stats.active_users,
            pending_users=stats.pending_users,
            unverified_users=stats.unverified_users,
            users_by_province=stats.users_by_province,
            users_by_district=stats.users_by_district,
        )


class UserDeleteResponse(CamelModel):
    message: str
    deleted_user: UUID
