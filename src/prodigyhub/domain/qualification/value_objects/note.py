"""Free-text notes attached to a qualification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

# Key prefixes written by the qualification UI into note texts
LOCATION_NOTE_PREFIX = "SLT_LOCATION:"
SERVICES_NOTE_PREFIX = "SLT_SERVICES:"
INFRASTRUCTURE_NOTE_PREFIX = "SLT_INFRASTRUCTURE:"
AREA_MATCH_NOTE_PREFIX = "SLT_AREA_MATCH:"

SYSTEM_NOTE_AUTHOR = "SLT System"


@dataclass(frozen=True)
class Note:
    """A TMF ``Note``: text with optional author and date."""

    text: str
    author: Optional[str] = None
    date: Optional[datetime] = None

    def has_prefix(self, prefix: str) -> bool:
        return bool(self.text) and self.text.startswith(prefix)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "author": self.author,
            "date": self.date.isoformat() if self.date else None,
        }
