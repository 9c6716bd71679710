"""Turn a qualification's location into a user address."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from prodigyhub.domain.qualification import (
    Location,
    Note,
    Qualification,
    parse_location_note,
)
from prodigyhub.domain.user import Address

EMAIL_IN_TEXT_PATTERN = re.compile(r"([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")


def location_to_address(location: Location) -> Address:
    """Map a location to an address. The district doubles as the city."""
    return Address(
        street=location.address,
        city=location.district,
        district=location.district,
        province=location.province,
        postal_code=location.postal_code,
    )


def address_from_notes(notes: Iterable[Note]) -> Optional[Address]:
    """
    Read an address from the first ``SLT_LOCATION:`` note.

    Returns
    -------
    The address, or None if there is no well-formed location note.
    """
    location = parse_location_note(notes)
    if location is None:
        return None
    return location_to_address(location)


def extract_address(qualification: Qualification) -> Optional[Address]:
    """
    Extract the address a qualification was checked for.

    The structured location wins; legacy records without one fall back
    to their location note.
    """
    location = qualification.location
    if location is not None and location.is_complete:
        return location_to_address(location)
    return address_from_notes(qualification.notes)


def extract_customer_email(qualification: Qualification) -> Optional[str]:
    """
    Find the customer's email on a qualification.

    Looks at the first related party, then the description, then the
    note texts.
    """
    if qualification.customer_email:
        return qualification.customer_email

    texts = [qualification.description or ""]
    texts.extend(note.text for note in qualification.notes)
    for text in texts:
        match = EMAIL_IN_TEXT_PATTERN.search(text)
        if match:
            return match.group(1)
    return None
