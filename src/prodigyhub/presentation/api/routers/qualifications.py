"""TMF679 Product Offering Qualification router."""

import logging
from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from prodigyhub.application.commands import (
    CheckLocationQualificationCommand,
    CreateQualificationCommand,
    DeleteQualificationCommand,
    SyncQualificationAddressCommand,
    UpdateQualificationCommand,
)
from prodigyhub.application.queries import (
    GetQualificationQuery,
    ListQualificationsQuery,
    LocationQualificationStatsQuery,
)
from prodigyhub.domain.qualification import Qualification, QualificationResult
from prodigyhub.presentation.api.dependencies import (
    AppSettings,
    InfraProvider,
    RepoFactory,
)
from prodigyhub.presentation.api.schemas.common import ErrorResponse
from prodigyhub.presentation.api.schemas.qualifications import (
    LocationQualificationRequest,
    LocationQualificationStatsResponse,
    QualificationCreateRequest,
    QualificationDeleteResponse,
    QualificationResponse,
    QualificationUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

RESOURCE = "/checkProductOfferingQualification"

FieldsParam = Annotated[
    Optional[str],
    Query(
        description="Comma-separated attributes; id, href and @type are always kept",
    ),
]


async def _sync_address_after_save(
    factory: RepoFactory,
    qualification: Qualification,
) -> None:
    """Copy a saved qualification's location to its customer.

    Runs after the qualification is committed; a failure is logged and
    never fails the request.
    """
    command = SyncQualificationAddressCommand.from_factory(factory)
    try:
        await command.execute(qualification)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        logger.exception("Address sync after save failed for %s", qualification.id)


@router.post(
    RESOURCE,
    status_code=status.HTTP_201_CREATED,
    summary="Create CheckProductOfferingQualification",
    responses={
        201: {"description": "Qualification created"},
        400: {
            "model": ErrorResponse,
            "description": "Invalid input, e.g. missing @type",
        },
        409: {
            "model": ErrorResponse,
            "description": "Qualification with this id already exists",
        },
    },
)
async def create_qualification(
    request: QualificationCreateRequest,
    factory: RepoFactory,
    settings: AppSettings,
) -> QualificationResponse:
    """
    Create a qualification record.

    A legacy ``SLT_LOCATION:`` note is turned into a structured location
    when no location is given.
    """
    command = CreateQualificationCommand.from_factory(factory)

    try:
        qualification = await command.execute(
            type=request.type,
            id=request.id,
            state=request.state,
            description=request.description,
            effective_qualification_date=request.effective_qualification_date,
            instant_sync_qualification=request.instant_sync_qualification,
            provide_alternative=request.provide_alternative,
            provide_only_available=request.provide_only_available,
            provide_result_reason=request.provide_result_reason,
            notes=[n.to_domain() for n in request.note],
            related_parties=[p.to_domain() for p in request.related_party],
            qualification_result=(
                request.qualification_result.value
                if request.qualification_result
                else None
            ),
            location=request.location.to_domain() if request.location else None,
            requested_services=request.requested_services,
            base_type=request.base_type,
            schema_location=request.schema_location,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Qualification created: %s", qualification.id)

    if settings.address_sync_on_save:
        await _sync_address_after_save(factory, qualification)

    return QualificationResponse.from_domain(qualification)


@router.get(
    RESOURCE,
    summary="List CheckProductOfferingQualification",
    responses={200: {"description": "Qualifications, newest first"}},
)
async def list_qualifications(  # NOQA: PLR0913
    factory: RepoFactory,
    state: Optional[str] = None,
    qualification_result: Annotated[
        Optional[QualificationResult],
        Query(alias="qualificationResult"),
    ] = None,
    creation_date: Annotated[
        Optional[datetime],
        Query(alias="creationDate", description="Created on or after"),
    ] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[Optional[int], Query(ge=1, le=1000)] = None,
    fields: FieldsParam = None,
) -> JSONResponse:
    query = ListQualificationsQuery.from_factory(factory)
    qualifications = await query.execute(
        state=state,
        qualification_result=(
            qualification_result.value if qualification_result else None
        ),
        created_since=creation_date,
        offset=offset,
        limit=limit,
    )
    return JSONResponse(
        content=[
            QualificationResponse.from_domain(q).to_json(fields) for q in qualifications
        ],
    )


@router.get(
    RESOURCE + "/{qualification_id}",
    summary="Get CheckProductOfferingQualification",
    responses={
        200: {"description": "Qualification", "model": QualificationResponse},
        404: {"model": ErrorResponse, "description": "Qualification not found"},
    },
)
async def get_qualification(
    qualification_id: str,
    factory: RepoFactory,
    fields: FieldsParam = None,
) -> JSONResponse:
    query = GetQualificationQuery.from_factory(factory)
    qualification = await query.execute(qualification_id)
    return JSONResponse(
        content=QualificationResponse.from_domain(qualification).to_json(fields),
    )


@router.patch(
    RESOURCE + "/{qualification_id}",
    summary="Update CheckProductOfferingQualification",
    responses={
        200: {"description": "Qualification updated"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Qualification not found"},
    },
)
async def update_qualification(
    qualification_id: str,
    request: QualificationUpdateRequest,
    factory: RepoFactory,
    settings: AppSettings,
) -> QualificationResponse:
    """Partially update a qualification; omitted attributes stay unchanged."""
    command = UpdateQualificationCommand.from_factory(factory)

    try:
        qualification = await command.execute(
            qualification_id,
            **request.to_changes(),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Qualification updated: %s", qualification.id)

    if settings.address_sync_on_save:
        await _sync_address_after_save(factory, qualification)

    return QualificationResponse.from_domain(qualification)


@router.delete(
    RESOURCE + "/{qualification_id}",
    summary="Delete CheckProductOfferingQualification",
    responses={
        200: {"description": "Qualification deleted"},
        404: {"model": ErrorResponse, "description": "Qualification not found"},
    },
)
async def delete_qualification(
    qualification_id: str,
    factory: RepoFactory,
) -> QualificationDeleteResponse:
    command = DeleteQualificationCommand.from_factory(factory)

    try:
        await command.execute(qualification_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Qualification deleted: %s", qualification_id)

    return QualificationDeleteResponse(
        message="CheckProductOfferingQualification deleted successfully",
        deleted_id=qualification_id,
    )


@router.post(
    "/locationQualification",
    status_code=status.HTTP_201_CREATED,
    summary="Check services available at a location",
    responses={
        201: {"description": "Qualification evaluated and stored"},
        400: {"model": ErrorResponse, "description": "District or province missing"},
    },
)
async def check_location_qualification(
    request: LocationQualificationRequest,
    factory: RepoFactory,
    provider: InfraProvider,
    settings: AppSettings,
) -> QualificationResponse:
    """
    Evaluate requested services against infrastructure at a location.

    The result (infrastructure, outcome, alternatives, installation
    estimate) is persisted as a qualification record and returned.
    """
    command = CheckLocationQualificationCommand.from_factory(factory, provider)

    try:
        qualification = await command.execute(
            location=request.location.to_domain(),
            requested_services=request.requested_services,
            include_alternatives=request.include_alternatives,
            related_parties=[p.to_domain() for p in request.related_party],
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info(
        "Location qualification %s: %s (provider=%s, customer_type=%s)",
        qualification.id,
        qualification.qualification_result,
        provider.name,
        request.customer_type,
    )

    if settings.address_sync_on_save:
        await _sync_address_after_save(factory, qualification)

    return QualificationResponse.from_domain(qualification)


@router.get(
    "/locationQualification/stats",
    summary="Location qualification statistics",
    responses={200: {"description": "Availability counts"}},
)
async def get_location_qualification_stats(
    factory: RepoFactory,
) -> LocationQualificationStatsResponse:
    """Counts over qualifications that recorded infrastructure."""
    query = LocationQualificationStatsQuery.from_factory(factory)
    stats = await query.execute()
    return LocationQualificationStatsResponse.from_dto(stats)
