"""TMF679 CheckProductOfferingQualification schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field

from prodigyhub.application.dtos import LocationQualificationStats
from prodigyhub.domain.qualification import (
    AlternativeOption,
    Location,
    Note,
    Qualification,
    QualificationResult,
    RelatedParty,
)
from prodigyhub.presentation.api.schemas.common import CamelModel, InfrastructureSchema

# Always returned, whatever ``fields`` selects
MANDATORY_FIELDS = ("id", "href", "@type")


class NoteSchema(CamelModel):
    text: str
    author: Optional[str] = None
    date: Optional[datetime] = None

    def to_domain(self) -> Note:
        return Note(text=self.text, author=self.author, date=self.date)


class RelatedPartySchema(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None

    def to_domain(self) -> RelatedParty:
        return RelatedParty(id=self.id, name=self.name, email=self.email, role=self.role)


class LocationSchema(CamelModel):
    address: str = ""
    district: str = ""
    province: str = ""
    postal_code: str = ""

    def to_domain(self) -> Location:
        return Location(
            address=self.address,
            district=self.district,
            province=self.province,
            postal_code=self.postal_code,
        )


class AlternativeOptionSchema(CamelModel):
    service: str
    technology: str
    speed: str
    monthly_fee: int
    availability: str = "Available"

    @classmethod
    def from_domain(cls, option: AlternativeOption) -> "AlternativeOptionSchema":
        return cls.model_validate(option.to_dict())


class QualificationCreateRequest(CamelModel):
    """Request schema for creating a CheckProductOfferingQualification."""

    type: str = Field(..., alias="@type")
    base_type: Optional[str] = Field(None, alias="@baseType")
    schema_location: Optional[str] = Field(None, alias="@schemaLocation")
    id: Optional[str] = None
    state: Optional[str] = None
    description: Optional[str] = None
    effective_qualification_date: Optional[datetime] = None
    instant_sync_qualification: bool = False
    provide_alternative: bool = False
    provide_only_available: bool = False
    provide_result_reason: bool = False
    note: list[NoteSchema] = Field(default_factory=list)
    related_party: list[RelatedPartySchema] = Field(default_factory=list)
    qualification_result: Optional[QualificationResult] = None
    location: Optional[LocationSchema] = None
    requested_services: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "@type": "CheckProductOfferingQualification",
                "description": "Fiber check for new customer",
                "relatedParty": [{"name": "Nimal Perera", "email": "nimal@example.lk"}],
                "note": [
                    {
                        "text": 'SLT_LOCATION:{"address":"12 Main St",'
                        '"district":"Kandy","province":"Central","postalCode":"20000"}',
                    },
                ],
            },
        },
    )


class QualificationUpdateRequest(CamelModel):
    """PATCH body. Omitted fields stay unchanged."""

    base_type: Optional[str] = Field(None, alias="@baseType")
    schema_location: Optional[str] = Field(None, alias="@schemaLocation")
    state: Optional[str] = None
    description: Optional[str] = None
    effective_qualification_date: Optional[datetime] = None
    instant_sync_qualification: Optional[bool] = None
    provide_alternative: Optional[bool] = None
    provide_only_available: Optional[bool] = None
    provide_result_reason: Optional[bool] = None
    note: Optional[list[NoteSchema]] = None
    related_party: Optional[list[RelatedPartySchema]] = None
    qualification_result: Optional[QualificationResult] = None
    location: Optional[LocationSchema] = None
    requested_services: Optional[list[str]] = None

    def to_changes(self) -> dict[str, Any]:
        """Keyword arguments for ``Qualification.update``."""
        return {
            "state": self.state,
            "description": self.description,
            "effective_qualification_date": self.effective_qualification_date,
            "instant_sync_qualification": self.instant_sync_qualification,
            "provide_alternative": self.provide_alternative,
            "provide_only_available": self.provide_only_available,
            "provide_result_reason": self.provide_result_reason,
            "notes": (
                [n.to_domain() for n in self.note] if self.note is not None else None
            ),
            "related_parties": (
                [p.to_domain() for p in self.related_party]
                if self.related_party is not None
                else None
            ),
            "qualification_result": self.qualification_result,
            "location": self.location.to_domain() if self.location else None,
            "requested_services": self.requested_services,
            "base_type": self.base_type,
            "schema_location": self.schema_location,
        }


class QualificationResponse(CamelModel):
    id: str
    href: Optional[str] = None
    state: str
    creation_date: datetime
    effective_qualification_date: Optional[datetime] = None
    description: Optional[str] = None
    instant_sync_qualification: bool
    provide_alternative: bool
    provide_only_available: bool
    provide_result_reason: bool
    note: list[NoteSchema]
    related_party: list[RelatedPartySchema]
    qualification_result: Optional[QualificationResult] = None
    location: Optional[LocationSchema] = None
    requested_services: list[str]
    infrastructure: Optional[InfrastructureSchema] = None
    alternative_options: list[AlternativeOptionSchema]
    estimated_installation_time: Optional[str] = None
    type: str = Field(..., alias="@type")
    base_type: Optional[str] = Field(None, alias="@baseType")
    schema_location: Optional[str] = Field(None, alias="@schemaLocation")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, qualification: Qualification) -> "QualificationResponse":
        location = qualification.location
        infrastructure = qualification.infrastructure
        return cls(
            id=qualification.id,
            href=qualification.href,
            state=qualification.state,
            creation_date=qualification.creation_date,
            effective_qualification_date=qualification.effective_qualification_date,
            description=qualification.description,
            instant_sync_qualification=qualification.instant_sync_qualification,
            provide_alternative=qualification.provide_alternative,
            provide_only_available=qualification.provide_only_available,
            provide_result_reason=qualification.provide_result_reason,
            note=[
                NoteSchema(text=n.text, author=n.author, date=n.date)
                for n in qualification.notes
            ],
            related_party=[
                RelatedPartySchema(id=p.id, name=p.name, email=p.email, role=p.role)
                for p in qualification.related_parties
            ],
            qualification_result=qualification.qualification_result,
            location=(
                LocationSchema.model_validate(location.to_dict()) if location else None
            ),
            requested_services=qualification.requested_services,
            infrastructure=(
                InfrastructureSchema.from_domain(infrastructure)
                if infrastructure
                else None
            ),
            alternative_options=[
                AlternativeOptionSchema.from_domain(o)
                for o in qualification.alternative_options
            ],
            estimated_installation_time=qualification.estimated_installation_time,
            type=qualification.type,
            base_type=qualification.base_type,
            schema_location=qualification.schema_location,
            created_at=qualification.created_at,
            updated_at=qualification.updated_at,
        )

    def to_json(self, fields: Optional[str] = None) -> dict[str, Any]:
        """
        Serialize with camelCase keys, optionally keeping only ``fields``.

        Parameters
        ----------
        fields
            Comma-separated top-level attribute names; id, href and @type
            are always kept
        """
        data = self.model_dump(mode="json", by_alias=True)
        if not fields:
            return data

        selected = {f.strip() for f in fields.split(",") if f.strip()}
        selected.update(MANDATORY_FIELDS)
        return {key: value for key, value in data.items() if key in selected}


class QualificationDeleteResponse(CamelModel):
    message: str
    deleted_id: str


class LocationQualificationRequest(CamelModel):
    """Check which services a location qualifies for."""

    location: LocationSchema
    requested_services: list[str] = Field(default_factory=list)
    include_alternatives: bool = False
    description: Optional[str] = None
    customer_type: Optional[str] = Field(
        None,
        description="residential, business or enterprise",
    )
    related_party: list[RelatedPartySchema] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "location": {
                    "address": "12 Main St",
                    "district": "Colombo",
                    "province": "Western",
                    "postalCode": "00100",
                },
                "requestedServices": ["Fiber 100M"],
                "includeAlternatives": True,
            },
        },
    )


class LocationQualificationStatsResponse(CamelModel):
    total_qualifications: int
    fiber_available: int
    adsl_available: int
    both_available: int
    neither_available: int
    success_rate: float = Field(..., description="Percent qualified, 2 decimals")

    @classmethod
    def from_dto(
        cls,
        stats: LocationQualificationStats,
    ) -> "LocationQualificationStatsResponse":
        return cls(
            total_qualifications=stats.total_qualifications,
            fiber_available=stats.fiber_available,
            adsl_available=stats.adsl_available,
            both_available=stats.both_available,
            neither_available=stats.neither_available,
            success_rate=stats.success_rate,
        )
