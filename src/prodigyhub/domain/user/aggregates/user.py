from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from prodigyhub.domain.shared.time import utc_now
from prodigyhub.domain.user.value_objects import Address, Email, UserStatus


class User:
    """
    User aggregate root.

    A customer account. The address is optional at signup and may be
    filled in later, either by a profile update or by address sync.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone_number: str,
        password_hash: str,
        status: Union[str, UserStatus] = UserStatus.UNVERIFIED,
        address: Optional[Address] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id if id is not None else uuid4()
        self._first_name = first_name.strip()
        self._last_name = last_name.strip()
        self._phone_number = phone_number.strip()
        self._password_hash = password_hash
        self._status = status if isinstance(status, UserStatus) else UserStatus(status)
        self._address = address
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}".strip()

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @property
    def has_address(self) -> bool:
        """A user only counts as addressed once a district is known."""
        return self._address is not None and self._address.has_district

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(  # NOQA: PLR0913
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[Union[str, Email]] = None,
        phone_number: Optional[str] = None,
        status: Optional[Union[str, UserStatus]] = None,
    ) -> None:
        # Only provided (non-None) values are updated; others are preserved.
        if first_name is not None:
            self._first_name = first_name.strip()
        if last_name is not None:
            self._last_name = last_name.strip()
        if email is not None:
            self._email = email if isinstance(email, Email) else Email(email)
        if phone_number is not None:
            self._phone_number = phone_number.strip()
        if status is not None:
            self._status = (
                status if isinstance(status, UserStatus) else UserStatus(status)
            )
        self._updated_at = utc_now()

    def change_address(self, address: Optional[Address]) -> None:
        """Replace the whole address, overwriting any previous one."""
        self._address = address
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone_number: str,
        password_hash: str,
        status: Union[str, UserStatus] = UserStatus.UNVERIFIED,
        address: Optional[Address] = None,
    ) -> "User":
        return cls(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            password_hash=password_hash,
            status=status,
            address=address,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        first_name: str,
        last_name: str,
        phone_number: str,
        password_hash: str,
        status: Union[str, UserStatus],
        address: Optional[Address],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            password_hash=password_hash,
            status=status,
            address=address,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
