"""Customer email addresses.

Emails are the only reliable key between a qualification's related party
and a user account, so both sides are normalized the same way here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from prodigyhub.domain.user.exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """A trimmed, lower-cased, syntactically valid email address."""

    value: str

    def __post_init__(self) -> None:
        candidate = (self.value or "").strip().lower()
        if not candidate:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if not EMAIL_PATTERN.match(candidate):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", candidate)

    @classmethod
    def try_parse(cls, raw: Optional[str]) -> Optional[Email]:
        """Return the email, or None for a blank or malformed value."""
        if not raw:
            return None
        try:
            return cls(raw)
        except InvalidEmailError:
            return None

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value
