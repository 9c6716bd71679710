"""Structured service location of a qualification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Location:
    """Where a customer wants service installed."""

    address: str
    district: str
    province: str
    postal_code: str = ""

    def __post_init__(self) -> None:
        for name in ("address", "district", "province", "postal_code"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value or "").strip())

    @property
    def is_complete(self) -> bool:
        return bool(self.address and self.district and self.province)

    def to_dict(self) -> dict[str, str]:
        return {
            "address": self.address,
            "district": self.district,
            "province": self.province,
            "postalCode": self.postal_code,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional[Location]:
        if not data:
            return None
        return cls(
            address=str(data.get("address") or ""),
            district=str(data.get("district") or ""),
            province=str(data.get("province") or ""),
            postal_code=str(data.get("postalCode") or data.get("postal_code") or ""),
        )
