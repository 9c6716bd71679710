"""Batch address sync against a real session.

A record whose write the database refuses must not poison the session:
the other records still sync and the transaction still commits.
"""

import pytest
from sqlalchemy import text

from prodigyhub.application.commands import SyncAddressesCommand
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.factories import (
    TestUserFactory,
    location_note,
    make_qualification,
)


async def _street_the_database_rejects(session) -> str:
    if session.bind.dialect.name == "postgresql":
        return "x" * 300  # address_street is VARCHAR(255)

    # SQLite ignores VARCHAR lengths; a trigger plays the same part
    await session.execute(
        text(
            "CREATE TRIGGER reject_street BEFORE UPDATE ON users "
            "WHEN NEW.address_street = 'REJECTED' "
            "BEGIN SELECT RAISE(ABORT, 'value too long'); END",
        ),
    )
    return "REJECTED"


class TestSyncAddressesWithDatabase:
    @pytest.mark.asyncio
    async def test_rejected_write_only_skips_its_record(self, session):
        factory = SQLAlchemyRepositoryFactory(session)
        users = factory.user_repository()
        qualifications = factory.qualification_repository()

        await users.save(TestUserFactory.alice(created_at=TestUserFactory.at(0)))
        await users.save(TestUserFactory.bob(created_at=TestUserFactory.at(1)))
        rejected = await _street_the_database_rejects(session)
        await qualifications.save(
            make_qualification(
                id="POQ-REJECTED",
                notes=[location_note(address=rejected)],
                email=TestUserFactory.ALICE_EMAIL,
                created_minutes=0,
            ),
        )
        await qualifications.save(
            make_qualification(
                id="POQ-KANDY",
                notes=[location_note(address="12 Main St", district="Kandy")],
                email=TestUserFactory.BOB_EMAIL,
                created_minutes=1,
            ),
        )

        result = await SyncAddressesCommand.from_factory(factory).execute()
        await session.commit()

        assert result.total_qualifications == 2
        assert result.synced_count == 1
        assert result.error_count == 1
        alice = await users.find_by_id(TestUserFactory.ALICE_ID)
        bob = await users.find_by_id(TestUserFactory.BOB_ID)
        assert alice.address is None
        assert bob.address.street == "12 Main St"
        assert bob.address.district == "Kandy"

    @pytest.mark.asyncio
    async def test_synced_addresses_survive_commit(self, session):
        factory = SQLAlchemyRepositoryFactory(session)
        users = factory.user_repository()
        await users.save(TestUserFactory.alice())
        await factory.qualification_repository().save(
            make_qualification(
                notes=[location_note(district="Galle", province="Southern")],
                email=TestUserFactory.ALICE_EMAIL,
            ),
        )
        await session.commit()

        result = await SyncAddressesCommand.from_factory(factory).execute()
        await session.commit()

        assert result.synced_count == 1
        count = await session.execute(
            text("SELECT count(*) FROM users WHERE address_district = 'Galle'"),
        )
        assert count.scalar_one() == 1
