"""Tests for the Qualification aggregate."""

from prodigyhub.domain.qualification import (
    DEFAULT_QUALIFICATION_TYPE,
    Location,
    Note,
    Qualification,
    QualificationResult,
    QualificationState,
    RelatedParty,
)
from tests.shared.fixtures.factories import infrastructure, location_note


class TestQualificationCreate:
    """Tests for Qualification.create and note migration."""

    def test_defaults(self):
        """A new qualification is acknowledged and gets a generated id."""
        qualification = Qualification.create()

        assert qualification.id
        assert qualification.type == DEFAULT_QUALIFICATION_TYPE
        assert qualification.state == QualificationState.ACKNOWLEDGED.value
        assert qualification.location is None
        assert qualification.has_location is False

    def test_migrates_location_from_note(self):
        """A legacy location note populates the structured location."""
        qualification = Qualification.create(notes=[location_note(district="Kandy")])

        assert qualification.location is not None
        assert qualification.location.district == "Kandy"
        assert qualification.location.province == "Central"
        assert qualification.has_location is True

    def test_structured_location_wins_over_note(self):
        """An explicit location with a district is kept as given."""
        location = Location(address="1 Galle Rd", district="Colombo", province="Western")

        qualification = Qualification.create(
            location=location,
            notes=[location_note(district="Kandy")],
        )

        assert qualification.location == location

    def test_location_without_district_is_replaced_from_note(self):
        """A location lacking a district does not block the migration."""
        qualification = Qualification.create(
            location=Location(address="somewhere", district="", province=""),
            notes=[location_note(district="Galle", province="Southern")],
        )

        assert qualification.location.district == "Galle"

    def test_malformed_note_leaves_location_empty(self):
        """A broken note is kept but yields no location."""
        qualification = Qualification.create(notes=[Note(text="SLT_LOCATION:{bad")])

        assert qualification.location is None
        # The note still marks the record as carrying a location
        assert qualification.has_location is True

    def test_customer_email_from_first_related_party(self):
        qualification = Qualification.create(
            related_parties=[
                RelatedParty(name="Nimal", email="nimal@example.lk"),
                RelatedParty(name="Agent", email="agent@example.lk"),
            ],
        )

        assert qualification.customer_email == "nimal@example.lk"

    def test_customer_email_none_without_parties(self):
        assert Qualification.create().customer_email is None


class TestQualificationUpdate:
    """Tests for partial updates."""

    def test_none_leaves_values_unchanged(self):
        qualification = Qualification.create(description="original")

        qualification.update(state="inProgress")

        assert qualification.description == "original"
        assert qualification.state == "inProgress"

    def test_new_notes_migrate_location(self):
        """Replacing notes with a location note fills the location."""
        qualification = Qualification.create()

        qualification.update(notes=[location_note(district="Matara", province="Southern")])

        assert qualification.location.district == "Matara"

    def test_new_notes_do_not_replace_existing_location(self):
        location = Location(address="1 Galle Rd", district="Colombo", province="Western")
        qualification = Qualification.create(location=location)

        qualification.update(notes=[location_note(district="Kandy")])

        assert qualification.location == location

    def test_result_string_is_coerced(self):
        qualification = Qualification.create()

        qualification.update(qualification_result="qualified")

        assert qualification.qualification_result is QualificationResult.QUALIFIED


class TestRecordEvaluation:
    """Tests for storing a location check outcome."""

    def test_sets_outcome_and_done_state(self):
        qualification = Qualification.create()
        infra = infrastructure(fiber=True, adsl=False)

        qualification.record_evaluation(
            infrastructure=infra,
            result=QualificationResult.QUALIFIED,
            estimated_installation_time="3-5 business days",
        )

        assert qualification.infrastructure == infra
        assert qualification.qualification_result is QualificationResult.QUALIFIED
        assert qualification.state == QualificationState.DONE.value
        assert qualification.effective_qualification_date is not None
