from datetime import datetime
from typing import Optional, Sequence, Union
from uuid import uuid4

from prodigyhub.domain.qualification.services.location_note import (
    parse_location_note,
)
from prodigyhub.domain.qualification.value_objects import (
    LOCATION_NOTE_PREFIX,
    AlternativeOption,
    InfrastructureAvailability,
    Location,
    Note,
    QualificationResult,
    QualificationState,
    RelatedParty,
)
from prodigyhub.domain.shared.time import utc_now

DEFAULT_QUALIFICATION_TYPE = "CheckProductOfferingQualification"


class Qualification:
    """
    CheckProductOfferingQualification aggregate root.

    Records a request to check whether product offerings can be provided
    at a location, and its outcome. The location is held as a structured
    value; records created from legacy notes get it populated from their
    ``SLT_LOCATION:`` note on create and update.
    """

    def __init__(  # NOQA: PLR0913
        self,
        id: Optional[str] = None,
        href: Optional[str] = None,
        state: str = QualificationState.ACKNOWLEDGED.value,
        description: Optional[str] = None,
        creation_date: Optional[datetime] = None,
        effective_qualification_date: Optional[datetime] = None,
        instant_sync_qualification: bool = False,
        provide_alternative: bool = False,
        provide_only_available: bool = False,
        provide_result_reason: bool = False,
        notes: Optional[Sequence[Note]] = None,
        related_parties: Optional[Sequence[RelatedParty]] = None,
        qualification_result: Optional[Union[str, QualificationResult]] = None,
        location: Optional[Location] = None,
        requested_services: Optional[Sequence[str]] = None,
        infrastructure: Optional[InfrastructureAvailability] = None,
        alternative_options: Optional[Sequence[AlternativeOption]] = None,
        estimated_installation_time: Optional[str] = None,
        type: str = DEFAULT_QUALIFICATION_TYPE,
        base_type: Optional[str] = None,
        schema_location: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or str(uuid4())
        self._href = href
        self._state = state
        self._description = description
        self._creation_date = creation_date or utc_now()
        self._effective_qualification_date = effective_qualification_date
        self._instant_sync_qualification = instant_sync_qualification
        self._provide_alternative = provide_alternative
        self._provide_only_available = provide_only_available
        self._provide_result_reason = provide_result_reason
        self._notes = list(notes or [])
        self._related_parties = list(related_parties or [])
        self._qualification_result = (
            QualificationResult(qualification_result)
            if qualification_result is not None
            else None
        )
        self._location = location
        self._requested_services = list(requested_services or [])
        self._infrastructure = infrastructure
        self._alternative_options = list(alternative_options or [])
        self._estimated_installation_time = estimated_installation_time
        self._type = type
        self._base_type = base_type
        self._schema_location = schema_location
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> str:
        return self._id

    @property
    def href(self) -> Optional[str]:
        return self._href

    @property
    def state(self) -> str:
        return self._state

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def creation_date(self) -> datetime:
        return self._creation_date

    @property
    def effective_qualification_date(self) -> Optional[datetime]:
        return self._effective_qualification_date

    @property
    def instant_sync_qualification(self) -> bool:
        return self._instant_sync_qualification

    @property
    def provide_alternative(self) -> bool:
        return self._provide_alternative

    @property
    def provide_only_available(self) -> bool:
        return self._provide_only_available

    @property
    def provide_result_reason(self) -> bool:
        return self._provide_result_reason

    @property
    def notes(self) -> list[Note]:
        return list(self._notes)

    @property
    def related_parties(self) -> list[RelatedParty]:
        return list(self._related_parties)

    @property
    def qualification_result(self) -> Optional[QualificationResult]:
        return self._qualification_result

    @property
    def location(self) -> Optional[Location]:
        return self._location

    @property
    def requested_services(self) -> list[str]:
        return list(self._requested_services)

    @property
    def infrastructure(self) -> Optional[InfrastructureAvailability]:
        return self._infrastructure

    @property
    def alternative_options(self) -> list[AlternativeOption]:
        return list(self._alternative_options)

    @property
    def estimated_installation_time(self) -> Optional[str]:
        return self._estimated_installation_time

    @property
    def type(self) -> str:
        return self._type

    @property
    def base_type(self) -> Optional[str]:
        return self._base_type

    @property
    def schema_location(self) -> Optional[str]:
        return self._schema_location

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def has_location(self) -> bool:
        """True for a structured location or a legacy location note."""
        if self._location is not None and self._location.district:
            return True
        return any(note.has_prefix(LOCATION_NOTE_PREFIX) for note in self._notes)

    @property
    def customer_email(self) -> Optional[str]:
        """Email of the first related party, if it carries one."""
        if self._related_parties and self._related_parties[0].email:
            return self._related_parties[0].email
        return None

    def assign_href(self, href: str) -> None:
        self._href = href

    def update(  # NOQA: PLR0913, C901
        self,
        state: Optional[str] = None,
        description: Optional[str] = None,
        effective_qualification_date: Optional[datetime] = None,
        instant_sync_qualification: Optional[bool] = None,
        provide_alternative: Optional[bool] = None,
        provide_only_available: Optional[bool] = None,
        provide_result_reason: Optional[bool] = None,
        notes: Optional[Sequence[Note]] = None,
        related_parties: Optional[Sequence[RelatedParty]] = None,
        qualification_result: Optional[Union[str, QualificationResult]] = None,
        location: Optional[Location] = None,
        requested_services: Optional[Sequence[str]] = None,
        base_type: Optional[str] = None,
        schema_location: Optional[str] = None,
    ) -> None:
        # Partial update: None leaves the attribute unchanged.
        if state is not None:
            self._state = state
        if description is not None:
            self._description = description
        if effective_qualification_date is not None:
            self._effective_qualification_date = effective_qualification_date
        if instant_sync_qualification is not None:
            self._instant_sync_qualification = instant_sync_qualification
        if provide_alternative is not None:
            self._provide_alternative = provide_alternative
        if provide_only_available is not None:
            self._provide_only_available = provide_only_available
        if provide_result_reason is not None:
            self._provide_result_reason = provide_result_reason
        if notes is not None:
            self._notes = list(notes)
        if related_parties is not None:
            self._related_parties = list(related_parties)
        if qualification_result is not None:
            self._qualification_result = QualificationResult(qualification_result)
        if location is not None:
            self._location = location
        if requested_services is not None:
            self._requested_services = list(requested_services)
        if base_type is not None:
            self._base_type = base_type
        if schema_location is not None:
            self._schema_location = schema_location

        if notes is not None and location is None:
            self.migrate_location_from_notes()
        self._updated_at = utc_now()

    def record_evaluation(  # NOQA: PLR0913
        self,
        infrastructure: InfrastructureAvailability,
        result: QualificationResult,
        estimated_installation_time: str,
        alternative_options: Sequence[AlternativeOption] = (),
        state: str = QualificationState.DONE.value,
    ) -> None:
        self._infrastructure = infrastructure
        self._qualification_result = result
        self._estimated_installation_time = estimated_installation_time
        self._alternative_options = list(alternative_options)
        self._state = state
        if self._effective_qualification_date is None:
            self._effective_qualification_date = utc_now()
        self._updated_at = utc_now()

    def migrate_location_from_notes(self) -> bool:
        """
        Populate the structured location from a legacy location note.

        Only applies when no structured location with a district is set.

        Returns
        -------
        True if the location was populated from a note.
        """
        if self._location is not None and self._location.district:
            return False

        location = parse_location_note(self._notes)
        if location is None:
            return False

        self._location = location
        return True

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        type: str = DEFAULT_QUALIFICATION_TYPE,
        id: Optional[str] = None,
        state: Optional[str] = None,
        description: Optional[str] = None,
        effective_qualification_date: Optional[datetime] = None,
        instant_sync_qualification: bool = False,
        provide_alternative: bool = False,
        provide_only_available: bool = False,
        provide_result_reason: bool = False,
        notes: Optional[Sequence[Note]] = None,
        related_parties: Optional[Sequence[RelatedParty]] = None,
        qualification_result: Optional[Union[str, QualificationResult]] = None,
        location: Optional[Location] = None,
        requested_services: Optional[Sequence[str]] = None,
        base_type: Optional[str] = None,
        schema_location: Optional[str] = None,
    ) -> "Qualification":
        qualification = cls(
            id=id,
            state=state or QualificationState.ACKNOWLEDGED.value,
            description=description,
            effective_qualification_date=effective_qualification_date,
            instant_sync_qualification=instant_sync_qualification,
            provide_alternative=provide_alternative,
            provide_only_available=provide_only_available,
            provide_result_reason=provide_result_reason,
            notes=notes,
            related_parties=related_parties,
            qualification_result=qualification_result,
            location=location,
            requested_services=requested_services,
            type=type,
            base_type=base_type,
            schema_location=schema_location,
        )
        qualification.migrate_location_from_notes()
        return qualification

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: str,
        href: Optional[str],
        state: str,
        description: Optional[str],
        creation_date: datetime,
        effective_qualification_date: Optional[datetime],
        instant_sync_qualification: bool,
        provide_alternative: bool,
        provide_only_available: bool,
        provide_result_reason: bool,
        notes: Sequence[Note],
        related_parties: Sequence[RelatedParty],
        qualification_result: Optional[str],
        location: Optional[Location],
        requested_services: Sequence[str],
        infrastructure: Optional[InfrastructureAvailability],
        alternative_options: Sequence[AlternativeOption],
        estimated_installation_time: Optional[str],
        type: str,
        base_type: Optional[str],
        schema_location: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Qualification":
        return cls(
            id=id,
            href=href,
            state=state,
            description=description,
            creation_date=creation_date,
            effective_qualification_date=effective_qualification_date,
            instant_sync_qualification=instant_sync_qualification,
            provide_alternative=provide_alternative,
            provide_only_available=provide_only_available,
            provide_result_reason=provide_result_reason,
            notes=notes,
            related_parties=related_parties,
            qualification_result=qualification_result,
            location=location,
            requested_services=requested_services,
            infrastructure=infrastructure,
            alternative_options=alternative_options,
            estimated_installation_time=estimated_installation_time,
            type=type,
            base_type=base_type,
            schema_location=schema_location,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Qualification):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Qualification(id={self._id}, state={self._state}, "
            f"result={self._qualification_result})"
        )
