"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from prodigyhub.domain.user.aggregates.user import User
from prodigyhub.domain.user.value_objects import Email, UserStatus


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user by ID. Returns False when nothing was deleted."""

    @abstractmethod
    async def find_all(
        self,
        status: Optional[UserStatus] = None,
        district: Optional[str] = None,
        province: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[User]:
        """
        List users, newest first.

        Parameters
        ----------
        status
            Only users with this status
        district
            Only users whose address is in this district
        province
            Only users whose address is in this province
        limit
            Maximum number of users (None = no limit)
        offset
            Number of users to skip
        """

    @abstractmethod
    async def find_most_recent_without_address(self) -> Optional[User]:
        """
        Return the most recently created user without an address.

        A user has no address when the address district is NULL or empty.
        """

    @abstractmethod
    async def find_most_recent(self) -> Optional[User]:
        """Return the most recently created user, regardless of address."""

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""

    @abstractmethod
    async def count_with_address(self) -> int:
        """Count users whose address district is set and non-empty."""

    @abstractmethod
    async def count_by_status(self) -> dict[str, int]:
        """Count users grouped by status value."""

    @abstractmethod
    async def count_by_province(self) -> dict[str, int]:
        """Count addressed users grouped by province."""

    @abstractmethod
    async def count_by_district(self) -> dict[str, int]:
        """Count addressed users grouped by district."""
