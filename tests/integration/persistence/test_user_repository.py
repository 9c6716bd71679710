"""Tests for UserRepositorySQLAlchemy."""

import pytest

from prodigyhub.domain.user import Address, EmailAlreadyExistsError, UserStatus
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TestUserFactory


@pytest.fixture
def repo(session):
    return UserRepositorySQLAlchemy(session)


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, repo):
        alice = TestUserFactory.alice(address=TestUserFactory.colombo_address())
        await repo.save(alice)

        by_id = await repo.find_by_id(alice.id)
        by_email = await repo.find_by_email("ALICE@example.com")

        assert by_id == alice
        assert by_email == alice
        assert by_id.address == TestUserFactory.colombo_address()
        assert by_id.password_hash == alice.password_hash
        assert await repo.exists_by_email(TestUserFactory.BOB_EMAIL) is False

    @pytest.mark.asyncio
    async def test_duplicate_email(self, repo):
        await repo.save(TestUserFactory.alice())

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(TestUserFactory.user(TestUserFactory.ALICE_EMAIL))

    @pytest.mark.asyncio
    async def test_address_update_persists(self, repo):
        alice = TestUserFactory.alice()
        await repo.save(alice)

        alice.change_address(
            Address(street="7 Temple Rd", city="Kandy", district="Kandy", province="Central"),
        )
        await repo.save(alice)

        stored = await repo.find_by_id(alice.id)
        assert stored.address.district == "Kandy"
        assert stored.address.postal_code == ""

    @pytest.mark.asyncio
    async def test_most_recent_selection(self, repo):
        """Newest by creation time, with and without the address filter."""
        older = TestUserFactory.alice(created_at=TestUserFactory.at(1))
        newer = TestUserFactory.bob(
            created_at=TestUserFactory.at(2),
            address=TestUserFactory.colombo_address(),
        )
        await repo.save(older)
        await repo.save(newer)

        assert await repo.find_most_recent() == newer
        assert await repo.find_most_recent_without_address() == older

    @pytest.mark.asyncio
    async def test_most_recent_on_empty_table(self, repo):
        assert await repo.find_most_recent() is None
        assert await repo.find_most_recent_without_address() is None

    @pytest.mark.asyncio
    async def test_counts(self, repo):
        await repo.save(
            TestUserFactory.alice(
                status=UserStatus.ACTIVE,
                address=TestUserFactory.colombo_address(),
            ),
        )
        await repo.save(TestUserFactory.bob())

        assert await repo.count() == 2
        assert await repo.count_with_address() == 1
        assert await repo.count_by_status() == {"active": 1, "unverified": 1}
        assert await repo.count_by_district() == {"Colombo": 1}
        assert await repo.count_by_province() == {"Western": 1}

    @pytest.mark.asyncio
    async def test_find_all_filters_and_order(self, repo):
        await repo.save(
            TestUserFactory.alice(
                status=UserStatus.ACTIVE,
                created_at=TestUserFactory.at(1),
                address=TestUserFactory.colombo_address(),
            ),
        )
        await repo.save(TestUserFactory.bob(created_at=TestUserFactory.at(2)))

        everyone = await repo.find_all()
        active = await repo.find_all(status=UserStatus.ACTIVE, district="Colombo")

        assert [u.email for u in everyone] == [
            TestUserFactory.BOB_EMAIL,
            TestUserFactory.ALICE_EMAIL,
        ]
        assert [u.email for u in active] == [TestUserFactory.ALICE_EMAIL]
        assert len(await repo.find_all(limit=1, offset=1)) == 1

    @pytest.mark.asyncio
    async def test_delete(self, repo):
        alice = TestUserFactory.alice()
        await repo.save(alice)

        assert await repo.delete(alice.id) is True
        assert await repo.delete(alice.id) is False
        assert await repo.find_by_id(alice.id) is None
