"""bcrypt hashing of customer passwords."""

from typing import Optional

import bcrypt

from prodigyhub.domain.user import WeakPasswordError


class PasswordHashingService:
    """Hash and verify account passwords.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("signup-password", email="nimal@example.lk")
    >>> service.verify("signup-password", hashed)
    True
    """

    MIN_LENGTH = 8
    # bcrypt only looks at the first 72 bytes; longer input is refused
    MAX_LENGTH = 72

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the key expansion rounds)
        """
        self._rounds = rounds

    def hash(self, password: str, email: Optional[str] = None) -> str:
        """
        Check the password rules, then hash.

        Raises
        ------
        WeakPasswordError
            See ``validate_strength``
        """
        self.validate_strength(password, email=email)
        hashed = bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """False on mismatch, and for stored values that are not bcrypt hashes."""
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str, email: Optional[str] = None) -> None:
        """
        Reject blank passwords, passwords outside 8..72 bytes, and a
        password that is just the account's email address.
        """
        if not password or not password.strip():
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(password.encode()) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} bytes"
            raise WeakPasswordError(msg)
        if email and password.strip().lower() == email.strip().lower():
            msg = "Password cannot be the email address"
            raise WeakPasswordError(msg)
