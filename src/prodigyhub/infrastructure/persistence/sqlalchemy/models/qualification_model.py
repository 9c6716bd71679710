"""SQLAlchemy models for the Qualification aggregate."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

from prodigyhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class QualificationModel(Base, TimestampMixin):
    """
    SQLAlchemy model for CheckProductOfferingQualification records.

    The location is stored in dedicated columns; related parties,
    requested services and the infrastructure snapshot are JSON. Notes
    live in their own table so they can be searched by prefix.

    Table: qualifications
    """

    __tablename__ = "qualifications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    href: Mapped[Optional[str]] = mapped_column(String(255))
    state: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    effective_qualification_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
    )

    # Request flags
    instant_sync_qualification: Mapped[bool] = mapped_column(Boolean, default=False)
    provide_alternative: Mapped[bool] = mapped_column(Boolean, default=False)
    provide_only_available: Mapped[bool] = mapped_column(Boolean, default=False)
    provide_result_reason: Mapped[bool] = mapped_column(Boolean, default=False)

    qualification_result: Mapped[Optional[str]] = mapped_column(
        String(20),
        index=True,
    )

    # Location
    location_address: Mapped[Optional[str]] = mapped_column(String(255))
    location_district: Mapped[Optional[str]] = mapped_column(String(100), index=True)
    location_province: Mapped[Optional[str]] = mapped_column(String(100))
    location_postal_code: Mapped[Optional[str]] = mapped_column(String(20))

    related_party: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    requested_services: Mapped[list[Any]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    infrastructure: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON(none_as_null=True),
    )
    alternative_options: Mapped[list[Any]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    estimated_installation_time: Mapped[Optional[str]] = mapped_column(String(64))

    # TMF polymorphism attributes
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    base_type: Mapped[Optional[str]] = mapped_column(String(100))
    schema_location: Mapped[Optional[str]] = mapped_column(String(255))

    notes: Mapped[list[QualificationNoteModel]] = relationship(
        "QualificationNoteModel",
        back_populates="qualification",
        cascade="all, delete-orphan",
        order_by="QualificationNoteModel.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<QualificationModel(id={self.id}, state={self.state})>"


class QualificationNoteModel(Base):
    """A note of a qualification, kept in stored order.

    Table: qualification_notes
    """

    __tablename__ = "qualification_notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    qualification_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("qualifications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[Optional[str]] = mapped_column(String(100))
    date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    qualification: Mapped[QualificationModel] = relationship(
        "QualificationModel",
        back_populates="notes",
    )

    def __repr__(self) -> str:
        return f"<QualificationNoteModel(id={self.id}, text={self.text[:40]})>"
