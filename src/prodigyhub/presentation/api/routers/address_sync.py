"""Address sync router: copy qualification locations onto user addresses."""

import logging
from uuid import UUID

from fastapi import APIRouter

from prodigyhub.application.commands import (
    SyncAddressesCommand,
    SyncAddressToUserCommand,
)
from prodigyhub.application.queries import AddressSyncStatusQuery
from prodigyhub.presentation.api.dependencies import AppSettings, RepoFactory
from prodigyhub.presentation.api.schemas.address_sync import (
    AddressSyncResponse,
    AddressSyncStatsResponse,
    AddressSyncStatusResponse,
    SyncedUserResponse,
    UserAddressSyncResponse,
)
from prodigyhub.presentation.api.schemas.common import ErrorResponse
from prodigyhub.presentation.api.schemas.users import AddressSchema

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/sync-addresses",
    summary="Sync addresses from qualifications",
    responses={
        200: {"description": "Batch finished; per-record failures are counted"},
        500: {"description": "Qualifications could not be loaded"},
    },
)
async def sync_addresses(
    factory: RepoFactory,
    settings: AppSettings,
) -> AddressSyncResponse:
    """
    Copy the location of recent qualifications to user addresses.

    Processes up to the configured batch limit, oldest qualification
    first. A record that cannot be parsed or matched to a user is
    counted in ``errorCount`` and skipped. Users picked without an email
    match are counted in ``heuristicMatches``.
    """
    command = SyncAddressesCommand.from_factory(
        factory,
        batch_limit=settings.address_sync_batch_limit,
    )

    try:
        result = await command.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info(
        "Address sync: %d/%d synced, %d errors, %d heuristic",
        result.synced_count,
        result.total_qualifications,
        result.error_count,
        result.heuristic_matches,
    )

    return AddressSyncResponse(
        success=True,
        message="Address sync completed",
        stats=AddressSyncStatsResponse.from_dto(result),
    )


@router.get(
    "/sync-addresses/status",
    summary="Address sync status",
    responses={200: {"description": "User and qualification counts"}},
)
async def get_sync_status(factory: RepoFactory) -> AddressSyncStatusResponse:
    """How many users have an address, and how many qualifications carry one."""
    query = AddressSyncStatusQuery.from_factory(factory)
    status = await query.execute()
    return AddressSyncStatusResponse.from_dto(status)


@router.post(
    "/sync-addresses/user/{user_id}",
    summary="Sync address to one user",
    responses={
        200: {"description": "Address applied"},
        400: {
            "model": ErrorResponse,
            "description": "Qualification location cannot be parsed",
        },
        404: {
            "model": ErrorResponse,
            "description": "User or qualification with location not found",
        },
    },
)
async def sync_address_to_user(
    user_id: UUID,
    factory: RepoFactory,
) -> UserAddressSyncResponse:
    """Apply the oldest qualification location to the given user."""
    command = SyncAddressToUserCommand.from_factory(factory)

    try:
        user = await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Address synced to user %s", user.email)

    return UserAddressSyncResponse(
        success=True,
        message="Address synced successfully",
        user=SyncedUserResponse(
            email=user.email,
            address=AddressSchema.from_domain(user.address),
        ),
    )
