"""Party related to a qualification (usually the customer)."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RelatedParty:
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
