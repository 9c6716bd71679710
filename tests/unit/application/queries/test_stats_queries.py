"""Unit tests for the statistics queries."""

from unittest.mock import AsyncMock

import pytest

from prodigyhub.application.queries import (
    AreaStatsQuery,
    LocationQualificationStatsQuery,
    UserStatsQuery,
)
from prodigyhub.domain.area import Area
from prodigyhub.domain.qualification import QualificationResult
from tests.shared.fixtures.factories import infrastructure, make_qualification


class TestLocationQualificationStatsQuery:
    @pytest.mark.asyncio
    async def test_counts_availability_combinations(self):
        repo = AsyncMock()
        repo.find_with_infrastructure.return_value = [
            make_qualification(
                infrastructure=infrastructure(fiber=True, adsl=True),
                qualification_result=QualificationResult.QUALIFIED,
            ),
            make_qualification(
                infrastructure=infrastructure(fiber=True, adsl=False),
                qualification_result=QualificationResult.QUALIFIED,
            ),
            make_qualification(
                infrastructure=infrastructure(fiber=False, adsl=True),
                qualification_result=QualificationResult.CONDITIONAL,
            ),
            make_qualification(
                infrastructure=infrastructure(fiber=False, adsl=False),
                qualification_result=QualificationResult.UNQUALIFIED,
            ),
        ]

        stats = await LocationQualificationStatsQuery(repo).execute()

        assert stats.total_qualifications == 4
        assert stats.fiber_available == 2
        assert stats.adsl_available == 2
        assert stats.both_available == 1
        assert stats.neither_available == 1
        assert stats.success_rate == 50.0

    @pytest.mark.asyncio
    async def test_empty(self):
        repo = AsyncMock()
        repo.find_with_infrastructure.return_value = []

        stats = await LocationQualificationStatsQuery(repo).execute()

        assert stats.total_qualifications == 0
        assert stats.success_rate == 0.0


class TestUserStatsQuery:
    @pytest.mark.asyncio
    async def test_status_counts_default_to_zero(self):
        repo = AsyncMock()
        repo.count.return_value = 3
        repo.count_by_status.return_value = {"active": 2, "unverified": 1}
        repo.count_by_province.return_value = {"Central": 2}
        repo.count_by_district.return_value = {"Kandy": 2}

        stats = await UserStatsQuery(repo).execute()

        assert stats.total_users == 3
        assert stats.active_users == 2
        assert stats.pending_users == 0
        assert stats.unverified_users == 1
        assert stats.users_by_district == {"Kandy": 2}


class TestAreaStatsQuery:
    @pytest.mark.asyncio
    async def test_counts(self):
        repo = AsyncMock()
        repo.find_all.return_value = [
            Area(
                name="Kandy",
                district="Kandy",
                province="Central",
                infrastructure=infrastructure(fiber=True, adsl=True),
            ),
            Area(
                name="Galle",
                district="Galle",
                province="Southern",
                status="planned",
                infrastructure=infrastructure(fiber=False, adsl=True),
            ),
        ]
        repo.count_by_province.return_value = {"Central": 1, "Southern": 1}
        repo.count_by_type.return_value = {"suburban": 2}

        stats = await AreaStatsQuery(repo).execute()

        assert stats.total_areas == 2
        assert stats.active_areas == 1
        assert stats.planned_areas == 1
        assert stats.fiber_areas == 1
        assert stats.adsl_areas == 2
        assert stats.mobile_areas == 2
        repo.find_all.assert_awaited_once_with(limit=None)
