"""
Test data builders with deterministic values.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory, location_note

    user = TestUserFactory.alice(created_at=TestUserFactory.at(2))
    note = location_note(district="Kandy", province="Central")
"""

import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Sequence
from uuid import UUID

from prodigyhub.domain.qualification import (
    LOCATION_NOTE_PREFIX,
    AdslAvailability,
    FiberAvailability,
    InfrastructureAvailability,
    Location,
    Note,
    Qualification,
    QualificationResult,
    RelatedParty,
)
from prodigyhub.domain.user import Address, User, UserStatus

BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

# Output of bcrypt; tests that never verify a password use it as-is
DUMMY_PASSWORD_HASH = "$2b$04$abcdefghijklmnopqrstuu5v6Q0J1w2eZ3m4n5o6p7q8r9s0t1u2v"


def location_note(
    address: str = "12 Main St",
    district: str = "Kandy",
    province: str = "Central",
    postal_code: str = "20000",
    **extra: Any,
) -> Note:
    """A legacy location note, as written by the qualification UI."""
    payload = {
        "address": address,
        "district": district,
        "province": province,
        "postalCode": postal_code,
        **extra,
    }
    return Note(text=LOCATION_NOTE_PREFIX + json.dumps(payload))


def infrastructure(fiber: bool = True, adsl: bool = True) -> InfrastructureAvailability:
    return InfrastructureAvailability(
        fiber=(
            FiberAvailability(available=True, technology="FTTH", max_speed="100 Mbps")
            if fiber
            else FiberAvailability(available=False)
        ),
        adsl=(
            AdslAvailability(available=True, technology="ADSL2+", max_speed="16 Mbps")
            if adsl
            else AdslAvailability(available=False)
        ),
    )


@dataclass(frozen=True)
class TestUserFactory:
    """Users with fixed ids and emails, easy to spot in logs."""

    __test__ = False

    ALICE_ID = UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
    ALICE_EMAIL = "alice@example.com"

    BOB_ID = UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb")
    BOB_EMAIL = "bob@example.com"

    @staticmethod
    def at(minutes: int) -> datetime:
        """A creation time ``minutes`` after the fixed base time."""
        return BASE_TIME + timedelta(minutes=minutes)

    @classmethod
    def user(  # NOQA: PLR0913
        cls,
        email: str,
        id: Optional[UUID] = None,
        first_name: str = "Test",
        last_name: str = "User",
        address: Optional[Address] = None,
        status: UserStatus = UserStatus.UNVERIFIED,
        created_at: Optional[datetime] = None,
    ) -> User:
        created = created_at or BASE_TIME
        return User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone_number="0771234567",
            password_hash=DUMMY_PASSWORD_HASH,
            status=status,
            address=address,
            id=id,
            created_at=created,
            updated_at=created,
        )

    @classmethod
    def alice(cls, **kwargs: Any) -> User:
        return cls.user(cls.ALICE_EMAIL, id=cls.ALICE_ID, first_name="Alice", **kwargs)

    @classmethod
    def bob(cls, **kwargs: Any) -> User:
        return cls.user(cls.BOB_EMAIL, id=cls.BOB_ID, first_name="Bob", **kwargs)

    @staticmethod
    def colombo_address() -> Address:
        return Address(
            street="1 Galle Rd",
            city="Colombo",
            district="Colombo",
            province="Western",
            postal_code="00300",
        )


def make_qualification(  # NOQA: PLR0913
    notes: Sequence[Note] = (),
    email: Optional[str] = None,
    location: Optional[Location] = None,
    description: Optional[str] = None,
    created_minutes: int = 0,
    id: Optional[str] = None,
    infrastructure: Optional[InfrastructureAvailability] = None,
    qualification_result: Optional[QualificationResult] = None,
) -> Qualification:
    """A stored-looking qualification, bypassing the note migration of create()."""
    created = BASE_TIME + timedelta(minutes=created_minutes)
    parties = [RelatedParty(name="Customer", email=email)] if email else []
    return Qualification(
        id=id,
        description=description,
        creation_date=created,
        notes=notes,
        related_parties=parties,
        location=location,
        infrastructure=infrastructure,
        qualification_result=qualification_result,
        created_at=created,
        updated_at=created,
    )
