"""Update a customer's profile, address or password."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from prodigyhub.domain.user import (
    Address,
    EmailAlreadyExistsError,
    InvalidAddressError,
    User,
    UserNotFoundError,
    UserRepository,
    UserStatus,
)
from prodigyhub.infrastructure.security import PasswordHashingService

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory


class UpdateUserCommand:
    """Update user attributes; None leaves a value unchanged."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
        )

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
        status: Optional[Union[str, UserStatus]] = None,
        address: Optional[Address] = None,
        password: Optional[str] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if email is not None:
            other = await self._user_repo.find_by_email(email)
            if other is not None and other.id != user.id:
                raise EmailAlreadyExistsError(other.email)

        if address is not None and address.missing_fields():
            raise InvalidAddressError(address.missing_fields())

        user.update_profile(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number,
            status=status,
        )
        if address is not None:
            user.change_address(address)
        if password is not None:
            user.change_password_hash(
                self._password_service.hash(password, email=user.email),
            )

        await self._user_repo.save(user)
        return user
