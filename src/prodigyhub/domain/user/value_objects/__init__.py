from prodigyhub.domain.user.value_objects.address import (
    REQUIRED_ADDRESS_FIELDS,
    Address,
)
from prodigyhub.domain.user.value_objects.email import Email
from prodigyhub.domain.user.value_objects.user_status import UserStatus

__all__ = [
    "Address",
    "Email",
    "REQUIRED_ADDRESS_FIELDS",
    "UserStatus",
]
