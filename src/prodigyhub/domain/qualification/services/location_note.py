"""Legacy ``SLT_LOCATION:`` note encoding of a qualification location.

Older qualifications carry their location only as a JSON payload embedded
in a note text. New records store a structured location; these helpers
read the legacy encoding (and write it, for clients that still expect it).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

from prodigyhub.domain.qualification.value_objects import (
    AREA_MATCH_NOTE_PREFIX,
    INFRASTRUCTURE_NOTE_PREFIX,
    LOCATION_NOTE_PREFIX,
    SERVICES_NOTE_PREFIX,
    SYSTEM_NOTE_AUTHOR,
    InfrastructureAvailability,
    Location,
    Note,
    QualificationResult,
)
from prodigyhub.domain.shared.time import utc_now

logger = logging.getLogger(__name__)

REQUIRED_LOCATION_KEYS = ("address", "district", "province")


def find_location_note(notes: Iterable[Note]) -> Optional[Note]:
    """Return the first note whose text starts with the location prefix."""
    for note in notes:
        if note.has_prefix(LOCATION_NOTE_PREFIX):
            return note
    return None


def parse_location_note(notes: Iterable[Note]) -> Optional[Location]:
    """
    Parse the location encoded in the first ``SLT_LOCATION:`` note.

    Parameters
    ----------
    notes
        Notes of a qualification, in stored order

    Returns
    -------
    The location, or None when there is no location note, the payload is
    not a JSON object, or address/district/province is missing, blank or
    not a string. Surrounding whitespace is trimmed from every value; a
    numeric ``postalCode`` is kept as its digits.
    """
    note = find_location_note(notes)
    if note is None:
        return None

    raw = note.text[len(LOCATION_NOTE_PREFIX) :]
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.debug("Malformed location note payload: %r", raw[:80])
        return None

    if not isinstance(payload, dict):
        return None

    address, district, province = (
        _required_text(payload.get(key)) for key in REQUIRED_LOCATION_KEYS
    )
    if address is None or district is None or province is None:
        return None

    return Location(
        address=address,
        district=district,
        province=province,
        postal_code=_postal_code(payload.get("postalCode")),
    )


def format_location_note(location: Location) -> Note:
    """Encode a location the way legacy clients write it."""
    return _system_note(LOCATION_NOTE_PREFIX, location.to_dict())


def format_services_note(requested_services: Iterable[str]) -> Note:
    return _system_note(SERVICES_NOTE_PREFIX, list(requested_services))


def format_infrastructure_note(infrastructure: InfrastructureAvailability) -> Note:
    return _system_note(INFRASTRUCTURE_NOTE_PREFIX, infrastructure.to_dict())


def format_area_match_note(
    matched_area: Optional[str],
    result: QualificationResult,
) -> Note:
    payload = {"matchedArea": matched_area, "qualificationResult": result.value}
    return _system_note(AREA_MATCH_NOTE_PREFIX, payload)


def _system_note(prefix: str, payload: Any) -> Note:
    return Note(
        text=prefix + json.dumps(payload),
        author=SYSTEM_NOTE_AUTHOR,
        date=utc_now(),
    )


def _required_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _postal_code(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return ""
