"""SQLAlchemy model for User aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from prodigyhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    The address is flattened into ``address_*`` columns so the sync
    queries can filter on the district directly. All address columns are
    NULL for users without an address.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(30), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="unverified",
        index=True,
    )

    # Address
    address_street: Mapped[Optional[str]] = mapped_column(String(255))
    address_city: Mapped[Optional[str]] = mapped_column(String(100))
    address_district: Mapped[Optional[str]] = mapped_column(String(100), index=True)
    address_province: Mapped[Optional[str]] = mapped_column(String(100), index=True)
    address_postal_code: Mapped[Optional[str]] = mapped_column(String(20))

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
