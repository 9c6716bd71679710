"""User account status."""

from enum import Enum


class UserStatus(str, Enum):
    """Lifecycle status of a customer account.

    No transitions are enforced; callers set the status directly.
    """

    UNVERIFIED = "unverified"
    ACTIVE = "active"
    PENDING = "pending"
