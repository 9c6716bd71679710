"""Address sync domain - copy qualification locations onto user accounts."""

from prodigyhub.domain.address_sync.services import (
    MatchMethod,
    UserMatch,
    UserMatcher,
    address_from_notes,
    extract_address,
    extract_customer_email,
    location_to_address,
)

__all__ = [
    "MatchMethod",
    "UserMatch",
    "UserMatcher",
    "address_from_notes",
    "extract_address",
    "extract_customer_email",
    "location_to_address",
]
