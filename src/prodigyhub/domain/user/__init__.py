"""User domain - customer accounts and their service address.

Design notes:
- User ID is a random UUID4 generated at creation
- Email is unique and normalized to lower case
- The address is a value object replaced as a whole
- Repository interface defined here, implementation in infrastructure
"""

from prodigyhub.domain.user.aggregates import User
from prodigyhub.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidAddressError,
    InvalidEmailError,
    UserNotFoundError,
    WeakPasswordError,
)
from prodigyhub.domain.user.repositories import UserRepository
from prodigyhub.domain.user.value_objects import (
    REQUIRED_ADDRESS_FIELDS,
    Address,
    Email,
    UserStatus,
)

__all__ = [
    "Address",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidAddressError",
    "InvalidEmailError",
    "REQUIRED_ADDRESS_FIELDS",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserStatus",
    "WeakPasswordError",
]
