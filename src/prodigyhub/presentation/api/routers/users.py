"""Users router for customer account endpoints."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from prodigyhub.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from prodigyhub.application.queries import (
    GetUserQuery,
    ListUsersQuery,
    UserStatsQuery,
)
from prodigyhub.domain.user import UserStatus
from prodigyhub.presentation.api.dependencies import PasswordService, RepoFactory
from prodigyhub.presentation.api.schemas.common import ErrorResponse
from prodigyhub.presentation.api.schemas.users import (
    UserCreateRequest,
    UserDeleteResponse,
    UserResponse,
    UserStatsResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

StatusFilter = Annotated[
    Optional[UserStatus],
    Query(alias="status", description="Filter by status: active, pending, unverified"),
]


async def _create_user(
    request: UserCreateRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> UserResponse:
    command = CreateUserCommand.from_factory(factory, password_service)

    try:
        user = await command.execute(
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            phone_number=request.phone_number,
            password=request.password,
            address=request.address.to_domain() if request.address else None,
            status=request.status,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("User created: %s", user.email)
    return UserResponse.from_domain(user)


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Invalid input or weak password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def signup(
    request: UserCreateRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> UserResponse:
    """
    Register a customer account.

    The password is stored as a bcrypt hash and never returned. An
    address is optional, but when given street, city, district and
    province are required.
    """
    return await _create_user(request, factory, password_service)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Invalid input or weak password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def create_user(
    request: UserCreateRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> UserResponse:
    """Create a user (same rules as signup)."""
    return await _create_user(request, factory, password_service)


@router.get(
    "",
    summary="List users",
    responses={200: {"description": "Users, newest first"}},
)
async def list_users(  # NOQA: PLR0913
    factory: RepoFactory,
    status_filter: StatusFilter = None,
    district: Optional[str] = None,
    province: Optional[str] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[Optional[int], Query(ge=1, le=1000)] = None,
) -> list[UserResponse]:
    query = ListUsersQuery.from_factory(factory)
    users = await query.execute(
        status=status_filter,
        district=district,
        province=province,
        limit=limit,
        offset=offset,
    )
    return [UserResponse.from_domain(u) for u in users]


@router.get(
    "/stats",
    summary="User statistics",
    responses={200: {"description": "Counts by status, province and district"}},
)
async def get_user_stats(factory: RepoFactory) -> UserStatsResponse:
    query = UserStatsQuery.from_factory(factory)
    stats = await query.execute()
    return UserStatsResponse.from_dto(stats)


@router.get(
    "/email/{email}",
    summary="Get user by email",
    responses={
        200: {"description": "User"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user_by_email(email: str, factory: RepoFactory) -> UserResponse:
    query = GetUserQuery.from_factory(factory)
    user = await query.by_email(email)
    return UserResponse.from_domain(user)


@router.get(
    "/district/{district}",
    summary="Active users in a district",
    responses={200: {"description": "Active users"}},
)
async def list_users_by_district(
    district: str,
    factory: RepoFactory,
) -> list[UserResponse]:
    query = ListUsersQuery.from_factory(factory)
    users = await query.active_in_district(district)
    return [UserResponse.from_domain(u) for u in users]


@router.get(
    "/province/{province}",
    summary="Active users in a province",
    responses={200: {"description": "Active users"}},
)
async def list_users_by_province(
    province: str,
    factory: RepoFactory,
) -> list[UserResponse]:
    query = ListUsersQuery.from_factory(factory)
    users = await query.active_in_province(province)
    return [UserResponse.from_domain(u) for u in users]


@router.get(
    "/{user_id}",
    summary="Get user",
    responses={
        200: {"description": "User"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user(user_id: UUID, factory: RepoFactory) -> UserResponse:
    query = GetUserQuery.from_factory(factory)
    user = await query.execute(user_id)
    return UserResponse.from_domain(user)


@router.put(
    "/{user_id}",
    summary="Update user",
    responses={
        200: {"description": "User updated"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    factory: RepoFactory,
    password_service: PasswordService,
) -> UserResponse:
    """Update profile fields, status, address or password."""
    command = UpdateUserCommand.from_factory(factory, password_service)

    try:
        user = await command.execute(
            user_id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone_number=request.phone_number,
            status=request.status,
            address=request.address.to_domain() if request.address else None,
            password=request.password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("User updated: %s", user.id)
    return UserResponse.from_domain(user)


@router.delete(
    "/{user_id}",
    summary="Delete user",
    responses={
        200: {"description": "User deleted"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def delete_user(user_id: UUID, factory: RepoFactory) -> UserDeleteResponse:
    command = DeleteUserCommand.from_factory(factory)

    try:
        user = await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("User deleted: %s", user.id)
    return UserDeleteResponse(message="User deleted successfully", deleted_user=user.id)
