"""Area management schemas for API request/response models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from prodigyhub.application.dtos import AreaStats
from prodigyhub.domain.area import Area, AreaStatus, AreaType
from prodigyhub.presentation.api.schemas.common import CamelModel, InfrastructureSchema


class AreaCreateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    district: str = Field(..., min_length=1)
    province: str = Field(..., min_length=1)
    area_type: AreaType = AreaType.SUBURBAN
    status: AreaStatus = AreaStatus.ACTIVE
    postal_code: Optional[str] = None
    description: Optional[str] = None
    infrastructure: Optional[InfrastructureSchema] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Kandy City",
                "district": "Kandy",
                "province": "Central",
                "areaType": "urban",
                "infrastructure": {
                    "fiber": {"available": True, "technology": "FTTH"},
                    "adsl": {"available": True, "technology": "ADSL2+"},
                    "mobile": {"available": True, "technologies": ["4G", "5G"]},
                },
            },
        },
    }


class AreaUpdateRequest(CamelModel):
    """Partial update. Omitted fields stay unchanged."""

    name: Optional[str] = Field(None, min_length=1)
    district: Optional[str] = Field(None, min_length=1)
    province: Optional[str] = Field(None, min_length=1)
    area_type: Optional[AreaType] = None
    status: Optional[AreaStatus] = None
    postal_code: Optional[str] = None
    description: Optional[str] = None
    infrastructure: Optional[InfrastructureSchema] = None


class AreaResponse(CamelModel):
    id: str
    name: str
    district: str
    province: str
    area_type: AreaType
    status: AreaStatus
    postal_code: Optional[str] = None
    description: Optional[str] = None
    infrastructure: InfrastructureSchema
    created_by: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, area: Area) -> "AreaResponse":
        return cls(
            id=area.id,
            name=area.name,
            district=area.district,
            province=area.province,
            area_type=area.area_type,
            status=area.status,
            postal_code=area.postal_code,
            description=area.description,
            infrastructure=InfrastructureSchema.from_domain(area.infrastructure),
            created_by=area.created_by,
            created_at=area.created_at,
            updated_at=area.updated_at,
        )


class DeletedAreaSummary(CamelModel):
    id: str
    name: str
    district: str
    province: str


class AreaDeleteResponse(CamelModel):
    message: str
    deleted_area: DeletedAreaSummary


class InfrastructureCoverage(CamelModel):
    fiber_areas: int
    adsl_areas: int
    mobile_areas: int


class AreaStatsResponse(CamelModel):
    total_areas: int
    active_areas: int
    planned_areas: int
    areas_by_province: dict[str, int]
    areas_by_type: dict[str, int]
    infrastructure: InfrastructureCoverage

    @classmethod
    def from_dto(cls, stats: AreaStats) -> "AreaStatsResponse":
        return cls(
            total_areas=stats.total_areas,
            active_areas=stats.active_areas,
            planned_areas=stats.planned_areas,
            areas_by_province=stats.areas_by_province,
            areas_by_type=stats.areas_by_type,
            infrastructure=InfrastructureCoverage(
                fiber_areas=stats.fiber_areas,
                adsl_areas=stats.adsl_areas,
                mobile_areas=stats.mobile_areas,
            ),
        )
