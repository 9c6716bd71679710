"""Unit tests for area commands."""

from unittest.mock import AsyncMock

import pytest

from prodigyhub.application.commands import (
    CreateAreaCommand,
    DeleteAreaCommand,
    UpdateAreaCommand,
)
from prodigyhub.domain.area import (
    Area,
    AreaNotFoundError,
    AreaStatus,
    AreaType,
    DuplicateAreaError,
)


def _area(district: str = "Kandy", province: str = "Central") -> Area:
    return Area(name=f"{district} area", district=district, province=province)


class TestCreateAreaCommand:
    def setup_method(self):
        self.area_repo = AsyncMock()
        self.area_repo.find_by_location.return_value = None
        self.command = CreateAreaCommand(self.area_repo)

    @pytest.mark.asyncio
    async def test_creates_area(self):
        area = await self.command.execute(
            name=" Kandy City ",
            district="Kandy",
            province="Central",
            area_type="urban",
            created_by="ops-user",
        )

        assert area.name == "Kandy City"
        assert area.area_type is AreaType.URBAN
        assert area.status is AreaStatus.ACTIVE
        assert area.created_by == "ops-user"
        assert area.infrastructure.has_fixed_line is False
        self.area_repo.save.assert_awaited_once_with(area)

    @pytest.mark.asyncio
    async def test_duplicate_district(self):
        self.area_repo.find_by_location.return_value = _area()

        with pytest.raises(DuplicateAreaError):
            await self.command.execute(name="x", district="Kandy", province="Central")


class TestUpdateAreaCommand:
    def setup_method(self):
        self.area_repo = AsyncMock()
        self.command = UpdateAreaCommand(self.area_repo)

    @pytest.mark.asyncio
    async def test_updates_status(self):
        area = _area()
        self.area_repo.find_by_id.return_value = area

        await self.command.execute(area.id, status="planned")

        assert area.status is AreaStatus.PLANNED
        self.area_repo.find_by_location.assert_not_called()
        self.area_repo.save.assert_awaited_once_with(area)

    @pytest.mark.asyncio
    async def test_move_onto_other_area(self):
        area = _area()
        self.area_repo.find_by_id.return_value = area
        self.area_repo.find_by_location.return_value = _area("Galle", "Southern")

        with pytest.raises(DuplicateAreaError):
            await self.command.execute(area.id, district="Galle", province="Southern")

        self.area_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_area(self):
        self.area_repo.find_by_id.return_value = None

        with pytest.raises(AreaNotFoundError):
            await self.command.execute("missing", name="x")


class TestDeleteAreaCommand:
    @pytest.mark.asyncio
    async def test_deletes(self):
        repo = AsyncMock()
        area = _area()
        repo.find_by_id.return_value = area

        deleted = await DeleteAreaCommand(repo).execute(area.id)

        assert deleted is area
        repo.delete.assert_awaited_once_with(area.id)

    @pytest.mark.asyncio
    async def test_unknown_area(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        with pytest.raises(AreaNotFoundError):
            await DeleteAreaCommand(repo).execute("missing")
