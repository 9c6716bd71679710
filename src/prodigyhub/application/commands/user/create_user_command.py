"""Register a customer account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from prodigyhub.domain.user import (
    Address,
    EmailAlreadyExistsError,
    InvalidAddressError,
    User,
    UserRepository,
    UserStatus,
)
from prodigyhub.infrastructure.security import PasswordHashingService

if TYPE_CHECKING:
    from prodigyhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a new user."""

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
    ) -> CreateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
        )

    async def execute(  # NOQA: PLR0913
        self,
        email: str,
        first_name: str,
        last_name: str,
        phone_number: str,
        password: str,
        address: Optional[Address] = None,
        status: Union[str, UserStatus] = UserStatus.UNVERIFIED,
    ) -> User:
        """
        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        InvalidAddressError
            If an address is given without street, city, district or province
        WeakPasswordError
            If the password is blank, too short or too long, or equals the email
        """
        if address is not None and address.missing_fields():
            raise InvalidAddressError(address.missing_fields())

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.strip().lower())

        user = User.create(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            password_hash=self._password_service.hash(password, email=email),
            status=status,
            address=address,
        )
        await self._user_repo.save(user)

        logger.info("Registered user %s", user.email)
        return user
