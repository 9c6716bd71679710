"""Tests for QualificationRepositorySQLAlchemy."""

import pytest

from prodigyhub.domain.qualification import (
    AlternativeOption,
    Location,
    Note,
    QualificationResult,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories import (
    QualificationRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import (
    TestUserFactory,
    infrastructure,
    location_note,
    make_qualification,
)


@pytest.fixture
def repo(session):
    return QualificationRepositorySQLAlchemy(session)


class TestQualificationRepository:
    @pytest.mark.asyncio
    async def test_round_trip(self, repo):
        qualification = make_qualification(
            id="POQ-1",
            notes=[location_note(), Note(text="call after 5pm", author="agent")],
            email="nimal@example.lk",
            location=Location(address="12 Main St", district="Kandy", province="Central"),
            infrastructure=infrastructure(fiber=True, adsl=False),
            qualification_result=QualificationResult.QUALIFIED,
        )
        qualification.record_evaluation(
            infrastructure=infrastructure(fiber=True, adsl=False),
            result=QualificationResult.QUALIFIED,
            estimated_installation_time="3-5 business days",
            alternative_options=[
                AlternativeOption(
                    service="Fiber Broadband",
                    technology="FTTH",
                    speed="100 Mbps",
                    monthly_fee=2500,
                ),
            ],
        )
        await repo.save(qualification)

        stored = await repo.find_by_id("POQ-1")

        assert stored.location == qualification.location
        assert [n.text for n in stored.notes] == [n.text for n in qualification.notes]
        assert stored.notes[1].author == "agent"
        assert stored.customer_email == "nimal@example.lk"
        assert stored.infrastructure == qualification.infrastructure
        assert stored.alternative_options[0].monthly_fee == 2500
        assert stored.qualification_result is QualificationResult.QUALIFIED
        assert await repo.exists("POQ-1") is True
        assert await repo.exists("POQ-2") is False

    @pytest.mark.asyncio
    async def test_update_replaces_notes(self, repo):
        qualification = make_qualification(id="POQ-1", notes=[Note(text="first")])
        await repo.save(qualification)

        qualification.update(notes=[Note(text="second"), Note(text="third")])
        await repo.save(qualification)

        stored = await repo.find_by_id("POQ-1")
        assert [n.text for n in stored.notes] == ["second", "third"]

    @pytest.mark.asyncio
    async def test_find_with_location_oldest_first(self, repo):
        """Structured locations and legacy notes both count."""
        await repo.save(
            make_qualification(id="newest-note", notes=[location_note()], created_minutes=3),
        )
        await repo.save(make_qualification(id="no-location", created_minutes=0))
        await repo.save(
            make_qualification(
                id="structured",
                location=Location(address="1 Galle Rd", district="Colombo", province="Western"),
                created_minutes=2,
            ),
        )
        await repo.save(
            make_qualification(
                id="malformed-note",
                notes=[Note(text="SLT_LOCATION:{bad")],
                created_minutes=1,
            ),
        )

        found = await repo.find_with_location(limit=10)

        assert [q.id for q in found] == ["malformed-note", "structured", "newest-note"]
        assert [q.id for q in await repo.find_with_location(limit=1)] == ["malformed-note"]
        assert await repo.count_with_location() == 3

    @pytest.mark.asyncio
    async def test_prefix_is_matched_literally(self, repo):
        """Only notes starting with the prefix count as locations."""
        await repo.save(
            make_qualification(id="mention", notes=[Note(text="no SLT_LOCATION: here")]),
        )

        assert await repo.find_with_location(limit=10) == []

    @pytest.mark.asyncio
    async def test_find_all_filters(self, repo):
        await repo.save(
            make_qualification(
                id="a",
                qualification_result=QualificationResult.QUALIFIED,
                created_minutes=1,
            ),
        )
        await repo.save(make_qualification(id="b", created_minutes=2))

        assert [q.id for q in await repo.find_all()] == ["b", "a"]
        assert [
            q.id for q in await repo.find_all(qualification_result="qualified")
        ] == ["a"]
        assert [
            q.id for q in await repo.find_all(created_since=TestUserFactory.at(2))
        ] == ["b"]

    @pytest.mark.asyncio
    async def test_find_with_infrastructure(self, repo):
        await repo.save(make_qualification(id="checked", infrastructure=infrastructure()))
        await repo.save(make_qualification(id="plain"))

        assert [q.id for q in await repo.find_with_infrastructure()] == ["checked"]

    @pytest.mark.asyncio
    async def test_delete(self, repo):
        await repo.save(make_qualification(id="POQ-1", notes=[location_note()]))

        assert await repo.delete("POQ-1") is True
        assert await repo.delete("POQ-1") is False
        assert await repo.count_with_location() == 0
