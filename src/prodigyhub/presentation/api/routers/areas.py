"""Area management router: serviced areas and their infrastructure."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Header, Query, status

from prodigyhub.application.commands import (
    CreateAreaCommand,
    DeleteAreaCommand,
    UpdateAreaCommand,
)
from prodigyhub.application.queries import (
    AreaStatsQuery,
    GetAreaQuery,
    ListAreasQuery,
)
from prodigyhub.domain.area import AreaStatus, AreaType
from prodigyhub.presentation.api.dependencies import RepoFactory
from prodigyhub.presentation.api.schemas.areas import (
    AreaCreateRequest,
    AreaDeleteResponse,
    AreaResponse,
    AreaStatsResponse,
    AreaUpdateRequest,
    DeletedAreaSummary,
)
from prodigyhub.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

AreaTypeFilter = Annotated[
    Optional[AreaType],
    Query(alias="areaType", description="urban, suburban or rural"),
]
StatusFilter = Annotated[
    Optional[AreaStatus],
    Query(alias="status", description="active, planned or inactive"),
]


@router.post(
    "/area",
    status_code=status.HTTP_201_CREATED,
    summary="Create area",
    responses={
        201: {"description": "Area created"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {
            "model": ErrorResponse,
            "description": "An area for this district and province exists",
        },
    },
)
async def create_area(
    request: AreaCreateRequest,
    factory: RepoFactory,
    x_user_id: Annotated[Optional[str], Header()] = None,
) -> AreaResponse:
    """Create an area; ``X-User-ID`` is recorded as its creator."""
    command = CreateAreaCommand.from_factory(factory)

    try:
        area = await command.execute(
            name=request.name,
            district=request.district,
            province=request.province,
            area_type=request.area_type,
            status=request.status,
            infrastructure=(
                request.infrastructure.to_domain() if request.infrastructure else None
            ),
            postal_code=request.postal_code,
            description=request.description,
            created_by=x_user_id or "system",
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Area created: %s (%s, %s)", area.name, area.district, area.province)
    return AreaResponse.from_domain(area)


@router.get(
    "/area",
    summary="List areas",
    responses={200: {"description": "Areas, newest first"}},
)
async def list_areas(  # NOQA: PLR0913
    factory: RepoFactory,
    province: Optional[str] = None,
    district: Optional[str] = None,
    area_type: AreaTypeFilter = None,
    status_filter: StatusFilter = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
) -> list[AreaResponse]:
    query = ListAreasQuery.from_factory(factory)
    areas = await query.execute(
        province=province,
        district=district,
        area_type=area_type.value if area_type else None,
        status=status_filter.value if status_filter else None,
        offset=offset,
        limit=limit,
    )
    return [AreaResponse.from_domain(a) for a in areas]


@router.get(
    "/area/stats",
    summary="Area statistics",
    responses={200: {"description": "Counts by status, province, type and technology"}},
)
async def get_area_stats(factory: RepoFactory) -> AreaStatsResponse:
    query = AreaStatsQuery.from_factory(factory)
    stats = await query.execute()
    return AreaStatsResponse.from_dto(stats)


@router.get(
    "/area/{area_id}",
    summary="Get area",
    responses={
        200: {"description": "Area"},
        404: {"model": ErrorResponse, "description": "Area not found"},
    },
)
async def get_area(area_id: str, factory: RepoFactory) -> AreaResponse:
    query = GetAreaQuery.from_factory(factory)
    area = await query.execute(area_id)
    return AreaResponse.from_domain(area)


@router.put(
    "/area/{area_id}",
    summary="Update area",
    responses={
        200: {"description": "Area updated"},
        404: {"model": ErrorResponse, "description": "Area not found"},
        409: {
            "model": ErrorResponse,
            "description": "Another area covers the new district and province",
        },
    },
)
async def update_area(
    area_id: str,
    request: AreaUpdateRequest,
    factory: RepoFactory,
) -> AreaResponse:
    command = UpdateAreaCommand.from_factory(factory)

    try:
        area = await command.execute(
            area_id=area_id,
            name=request.name,
            district=request.district,
            province=request.province,
            area_type=request.area_type,
            status=request.status,
            infrastructure=(
                request.infrastructure.to_domain() if request.infrastructure else None
            ),
            postal_code=request.postal_code,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Area updated: %s", area.id)
    return AreaResponse.from_domain(area)


@router.delete(
    "/area/{area_id}",
    summary="Delete area",
    responses={
        200: {"description": "Area deleted"},
        404: {"model": ErrorResponse, "description": "Area not found"},
    },
)
async def delete_area(area_id: str, factory: RepoFactory) -> AreaDeleteResponse:
    command = DeleteAreaCommand.from_factory(factory)

    try:
        area = await command.execute(area_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Area deleted: %s", area.id)
    return AreaDeleteResponse(
        message="Area deleted successfully",
        deleted_area=DeletedAreaSummary(
            id=area.id,
            name=area.name,
            district=area.district,
            province=area.province,
        ),
    )
