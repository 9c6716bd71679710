"""SQLAlchemy model for Area entities."""

from typing import Any, Optional

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from prodigyhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AreaModel(Base, TimestampMixin):
    """
    SQLAlchemy model for serviced areas.

    Table: areas
    """

    __tablename__ = "areas"
    __table_args__ = (
        UniqueConstraint("district", "province", name="uq_areas_district_province"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    district: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20))
    area_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    infrastructure: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<AreaModel(id={self.id}, district={self.district})>"
