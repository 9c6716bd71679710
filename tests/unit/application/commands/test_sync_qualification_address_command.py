"""Unit tests for SyncQualificationAddressCommand (sync after save)."""

from unittest.mock import AsyncMock

import pytest

from prodigyhub.application.commands import SyncQualificationAddressCommand
from prodigyhub.domain.address_sync import MatchMethod
from tests.shared.fixtures.factories import (
    TestUserFactory,
    location_note,
    make_qualification,
)


class TestSyncQualificationAddressCommand:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.user_repo.find_by_email.return_value = None
        self.user_repo.find_most_recent_without_address.return_value = None
        self.user_repo.find_most_recent.return_value = None
        self.command = SyncQualificationAddressCommand(self.user_repo)

    @pytest.mark.asyncio
    async def test_skips_qualification_without_location(self):
        match = await self.command.execute(make_qualification())

        assert match is None
        self.user_repo.find_most_recent_without_address.assert_not_called()

    @pytest.mark.asyncio
    async def test_syncs_to_customer_by_email(self):
        alice = TestUserFactory.alice(address=TestUserFactory.colombo_address())
        self.user_repo.find_by_email.return_value = alice

        match = await self.command.execute(
            make_qualification(notes=[location_note()], email=alice.email),
        )

        assert match.method is MatchMethod.EMAIL
        assert alice.address.district == "Kandy"
        self.user_repo.save.assert_awaited_once_with(alice)

    @pytest.mark.asyncio
    async def test_never_overwrites_without_email_match(self):
        """Only a user lacking an address may be guessed."""
        self.user_repo.find_most_recent.return_value = TestUserFactory.bob(
            address=TestUserFactory.colombo_address(),
        )

        match = await self.command.execute(make_qualification(notes=[location_note()]))

        assert match is None
        self.user_repo.find_most_recent.assert_not_called()
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_fills_user_without_address(self):
        bob = TestUserFactory.bob()
        self.user_repo.find_most_recent_without_address.return_value = bob

        match = await self.command.execute(make_qualification(notes=[location_note()]))

        assert match.user is bob
        assert match.is_heuristic is True
        assert bob.has_address is True
