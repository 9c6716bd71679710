"""Select the user that should receive a qualification's address."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from prodigyhub.domain.user import Email, User, UserRepository

logger = logging.getLogger(__name__)


class MatchMethod(str, Enum):
    """How a target user was found."""

    EMAIL = "email"
    WITHOUT_ADDRESS = "without_address"
    MOST_RECENT = "most_recent"

    @property
    def is_heuristic(self) -> bool:
        return self != MatchMethod.EMAIL


@dataclass(frozen=True)
class UserMatch:
    user: User
    method: MatchMethod

    @property
    def is_heuristic(self) -> bool:
        return self.method.is_heuristic


class UserMatcher:
    """Pick the user an extracted address belongs to.

    Qualifications carry no reliable link to an account. A customer email
    is used when one is present and known; otherwise the match is a guess:
    the newest user without an address, then (if allowed) the newest user
    overall. Guessed matches can assign an address to the wrong customer
    and are logged as such.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def find_target(
        self,
        email: Optional[str] = None,
        allow_overwrite: bool = True,
    ) -> Optional[UserMatch]:
        """
        Find the user to update.

        Parameters
        ----------
        email
            Customer email taken from the qualification, if any
        allow_overwrite
            Fall back to the newest user even if they already have an
            address

        Returns
        -------
        UserMatch, or None when no suitable user exists.
        """
        if email:
            user = await self._find_by_email(email)
            if user is not None:
                return UserMatch(user=user, method=MatchMethod.EMAIL)
            logger.info("No user with email %s, falling back to heuristics", email)

        user = await self._user_repo.find_most_recent_without_address()
        if user is not None:
            return self._heuristic(user, MatchMethod.WITHOUT_ADDRESS)

        if not allow_overwrite:
            return None

        user = await self._user_repo.find_most_recent()
        if user is not None:
            return self._heuristic(user, MatchMethod.MOST_RECENT)

        return None

    async def _find_by_email(self, email: str) -> Optional[User]:
        parsed = Email.try_parse(email)
        if parsed is None:
            logger.debug("Ignoring malformed customer email %r", email)
            return None
        return await self._user_repo.find_by_email(parsed)

    @staticmethod
    def _heuristic(user: User, method: MatchMethod) -> UserMatch:
        logger.warning(
            "Address target chosen heuristically (%s): %s",
            method.value,
            user.email,
        )
        return UserMatch(user=user, method=method)
