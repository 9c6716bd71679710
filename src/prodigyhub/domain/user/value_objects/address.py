"""Postal address value object attached to a user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

REQUIRED_ADDRESS_FIELDS = ("street", "city", "district", "province")


@dataclass(frozen=True)
class Address:
    """A user's normalized service address.

    ``city`` is kept separately from ``district`` even though addresses
    derived from a qualification location use the district for both.
    """

    street: str
    city: str
    district: str
    province: str
    postal_code: str = ""

    def __post_init__(self) -> None:
        for name in ("street", "city", "district", "province", "postal_code"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value or "").strip())

    @property
    def has_district(self) -> bool:
        return bool(self.district)

    def missing_fields(self) -> list[str]:
        """Return the names of required parts that are empty."""
        return [name for name in REQUIRED_ADDRESS_FIELDS if not getattr(self, name)]

    def to_dict(self) -> dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "district": self.district,
            "province": self.province,
            "postalCode": self.postal_code,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional[Address]:
        if not data:
            return None
        return cls(
            street=data.get("street") or "",
            city=data.get("city") or "",
            district=data.get("district") or "",
            province=data.get("province") or "",
            postal_code=data.get("postalCode") or data.get("postal_code") or "",
        )
