"""SQLAlchemy implementation of QualificationRepository."""

import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from prodigyhub.domain.qualification import (
    LOCATION_NOTE_PREFIX,
    AlternativeOption,
    InfrastructureAvailability,
    Location,
    Note,
    Qualification,
    QualificationRepository,
    RelatedParty,
)
from prodigyhub.domain.shared.time import ensure_tz_aware
from prodigyhub.infrastructure.persistence.sqlalchemy.models import (
    QualificationModel,
    QualificationNoteModel,
)

logger = logging.getLogger(__name__)


def _has_location_clause() -> Any:
    structured = and_(
        QualificationModel.location_district.is_not(None),
        QualificationModel.location_district != "",
    )
    legacy_note = QualificationModel.notes.any(
        QualificationNoteModel.text.startswith(LOCATION_NOTE_PREFIX, autoescape=True),
    )
    return or_(structured, legacy_note)


class QualificationRepositorySQLAlchemy(QualificationRepository):
    """SQLAlchemy implementation of the QualificationRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, qualification_id: str) -> Optional[Qualification]:
        model = await self._find_model_by_id(qualification_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def exists(self, qualification_id: str) -> bool:
        stmt = select(func.count(QualificationModel.id)).where(
            QualificationModel.id == qualification_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def save(self, qualification: Qualification) -> None:
        existing = await self._find_model_by_id(qualification.id)

        if existing:
            self._update_model(existing, qualification)
            logger.debug("Updated qualification: %s", qualification.id)
        else:
            self._session.add(self._map_to_model(qualification))
            logger.info("Created qualification: %s", qualification.id)

        await self._session.flush()

    async def delete(self, qualification_id: str) -> bool:
        model = await self._find_model_by_id(qualification_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted qualification: %s", qualification_id)
        return True

    async def find_all(
        self,
        state: Optional[str] = None,
        qualification_result: Optional[str] = None,
        created_since: Optional[datetime] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Qualification]:
        stmt = select(QualificationModel).order_by(
            QualificationModel.creation_date.desc(),
        )
        if state:
            stmt = stmt.where(QualificationModel.state == state)
        if qualification_result:
            stmt = stmt.where(
                QualificationModel.qualification_result == qualification_result,
            )
        if created_since is not None:
            stmt = stmt.where(QualificationModel.creation_date >= created_since)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_with_location(self, limit: int) -> list[Qualification]:
        stmt = (
            select(QualificationModel)
            .where(_has_location_clause())
            .order_by(QualificationModel.creation_date.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count_with_location(self) -> int:
        stmt = select(func.count(QualificationModel.id)).where(_has_location_clause())
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def find_with_infrastructure(self) -> list[Qualification]:
        stmt = (
            select(QualificationModel)
            .where(QualificationModel.infrastructure.is_not(None))
            .order_by(QualificationModel.creation_date.desc())
        )
        result = await self._session.execute(stmt)
        return [
            qualification
            for qualification in map(self._map_to_domain, result.scalars().all())
            if qualification.infrastructure is not None
        ]

    async def _find_model_by_id(
        self,
        qualification_id: str,
    ) -> Optional[QualificationModel]:
        stmt = select(QualificationModel).where(
            QualificationModel.id == qualification_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: QualificationModel) -> Qualification:
        location = None
        if model.location_district or model.location_address:
            location = Location(
                address=model.location_address or "",
                district=model.location_district or "",
                province=model.location_province or "",
                postal_code=model.location_postal_code or "",
            )

        notes = [
            Note(
                text=note.text,
                author=note.author,
                date=ensure_tz_aware(note.date) if note.date else None,
            )
            for note in model.notes
        ]
        related_parties = [
            RelatedParty(
                id=party.get("id"),
                name=party.get("name"),
                email=party.get("email"),
                role=party.get("role"),
            )
            for party in model.related_party or []
        ]

        effective_date = model.effective_qualification_date
        return Qualification.reconstitute(
            id=model.id,
            href=model.href,
            state=model.state,
            description=model.description,
            creation_date=ensure_tz_aware(model.creation_date),
            effective_qualification_date=(
                ensure_tz_aware(effective_date) if effective_date else None
            ),
            instant_sync_qualification=model.instant_sync_qualification,
            provide_alternative=model.provide_alternative,
            provide_only_available=model.provide_only_available,
            provide_result_reason=model.provide_result_reason,
            notes=notes,
            related_parties=related_parties,
            qualification_result=model.qualification_result,
            location=location,
            requested_services=list(model.requested_services or []),
            infrastructure=InfrastructureAvailability.from_dict(model.infrastructure),
            alternative_options=[
                AlternativeOption.from_dict(option)
                for option in model.alternative_options or []
            ],
            estimated_installation_time=model.estimated_installation_time,
            type=model.type,
            base_type=model.base_type,
            schema_location=model.schema_location,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, qualification: Qualification) -> QualificationModel:
        model = QualificationModel(
            id=qualification.id,
            creation_date=qualification.creation_date,
            created_at=qualification.created_at,
            notes=self._map_notes(qualification),
        )
        self._apply_attributes(model, qualification)
        return model

    def _update_model(
        self,
        model: QualificationModel,
        qualification: Qualification,
    ) -> None:
        # Note: id and creation_date never change.
        self._apply_attributes(model, qualification)
        model.notes = self._map_notes(qualification)

    @staticmethod
    def _apply_attributes(
        model: QualificationModel,
        qualification: Qualification,
    ) -> None:
        model.href = qualification.href
        model.state = qualification.state
        model.description = qualification.description
        model.effective_qualification_date = (
            qualification.effective_qualification_date
        )
        model.instant_sync_qualification = qualification.instant_sync_qualification
        model.provide_alternative = qualification.provide_alternative
        model.provide_only_available = qualification.provide_only_available
        model.provide_result_reason = qualification.provide_result_reason
        model.qualification_result = (
            qualification.qualification_result.value
            if qualification.qualification_result
            else None
        )

        location = qualification.location
        model.location_address = location.address if location else None
        model.location_district = location.district if location else None
        model.location_province = location.province if location else None
        model.location_postal_code = location.postal_code if location else None

        model.related_party = [
            {
                "id": party.id,
                "name": party.name,
                "email": party.email,
                "role": party.role,
            }
            for party in qualification.related_parties
        ]
        model.requested_services = qualification.requested_services
        model.infrastructure = (
            qualification.infrastructure.to_dict()
            if qualification.infrastructure
            else None
        )
        model.alternative_options = [
            option.to_dict() for option in qualification.alternative_options
        ]
        model.estimated_installation_time = qualification.estimated_installation_time
        model.type = qualification.type
        model.base_type = qualification.base_type
        model.schema_location = qualification.schema_location
        model.updated_at = qualification.updated_at

    @staticmethod
    def _map_notes(qualification: Qualification) -> list[QualificationNoteModel]:
        return [
            QualificationNoteModel(
                qualification_id=qualification.id,
                position=position,
                text=note.text,
                author=note.author,
                date=note.date,
            )
            for position, note in enumerate(qualification.notes)
        ]
