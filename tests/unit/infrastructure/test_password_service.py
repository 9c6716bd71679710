"""Unit tests for PasswordHashingService."""

import pytest

from prodigyhub.domain.user import WeakPasswordError
from prodigyhub.infrastructure.security import PasswordHashingService


class TestPasswordHashingService:
    def setup_method(self):
        # Minimum bcrypt cost keeps the tests fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        hashed = self.service.hash("signup-password")

        assert hashed != "signup-password"
        assert hashed.startswith("$2b$04$")
        assert self.service.verify("signup-password", hashed) is True
        assert self.service.verify("wrong-password", hashed) is False

    def test_hashes_are_salted(self):
        assert self.service.hash("signup-password") != self.service.hash("signup-password")

    def test_verify_rejects_non_bcrypt_value(self):
        assert self.service.verify("signup-password", "plaintext") is False

    @pytest.mark.parametrize("password", ["", "short", "x" * 73])
    def test_weak_passwords(self, password):
        with pytest.raises(WeakPasswordError):
            self.service.hash(password)

    def test_password_equal_to_email(self):
        with pytest.raises(WeakPasswordError):
            self.service.hash("Nimal@Example.lk", email="nimal@example.lk")

    def test_whitespace_only(self):
        with pytest.raises(WeakPasswordError):
            self.service.hash(" " * 10)
