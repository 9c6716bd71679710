"""Tests for the User aggregate and its value objects."""

import pytest

from prodigyhub.domain.user import (
    Address,
    Email,
    InvalidEmailError,
    User,
    UserStatus,
)
from tests.shared.fixtures.factories import TestUserFactory


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Nimal@Example.LK ").value == "nimal@example.lk"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a b@example.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_try_parse(self):
        assert Email.try_parse(" Kamal@Example.LK") == Email("kamal@example.lk")
        assert Email.try_parse("not-an-email") is None
        assert Email.try_parse(None) is None

    def test_domain(self):
        assert Email("nimal@mail.example.lk").domain == "mail.example.lk"


class TestAddress:
    def test_missing_fields(self):
        address = Address(street="", city="Kandy", district=" ", province="Central")

        assert address.missing_fields() == ["street", "district"]
        assert address.has_district is False

    def test_from_dict_accepts_both_postal_code_keys(self):
        camel = Address.from_dict(
            {
                "street": "a",
                "city": "b",
                "district": "c",
                "province": "d",
                "postalCode": "1",
            },
        )
        snake = Address.from_dict(
            {
                "street": "a",
                "city": "b",
                "district": "c",
                "province": "d",
                "postal_code": "1",
            },
        )

        assert camel == snake
        assert Address.from_dict(None) is None


class TestUser:
    def test_create_defaults(self):
        user = User.create(
            email="Kamal@Example.lk",
            first_name=" Kamal ",
            last_name="Silva",
            phone_number="0771234567",
            password_hash="hash",
        )

        assert user.email == "kamal@example.lk"
        assert user.first_name == "Kamal"
        assert user.full_name == "Kamal Silva"
        assert user.status is UserStatus.UNVERIFIED
        assert user.has_address is False

    def test_change_address_overwrites(self):
        user = TestUserFactory.alice(address=TestUserFactory.colombo_address())
        kandy = Address(street="7 Temple Rd", city="Kandy", district="Kandy", province="Central")

        user.change_address(kandy)

        assert user.address == kandy
        assert user.has_address is True

    def test_update_profile_keeps_unspecified_values(self):
        user = TestUserFactory.alice()

        user.update_profile(status="active")

        assert user.status is UserStatus.ACTIVE
        assert user.first_name == "Alice"
        assert user.email == TestUserFactory.ALICE_EMAIL
