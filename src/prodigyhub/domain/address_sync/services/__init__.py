from prodigyhub.domain.address_sync.services.address_extractor import (
    address_from_notes,
    extract_address,
    extract_customer_email,
    location_to_address,
)
from prodigyhub.domain.address_sync.services.user_matcher import (
    MatchMethod,
    UserMatch,
    UserMatcher,
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
