"""SQLAlchemy implementation of AreaRepository."""

import logging
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from prodigyhub.domain.area import Area, AreaRepository, DuplicateAreaError
from prodigyhub.domain.qualification import InfrastructureAvailability
from prodigyhub.domain.shared.time import ensure_tz_aware
from prodigyhub.infrastructure.persistence.sqlalchemy.models import AreaModel

logger = logging.getLogger(__name__)


class AreaRepositorySQLAlchemy(AreaRepository):
    """SQLAlchemy implementation of the AreaRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, area_id: str) -> Optional[Area]:
        model = await self._find_model_by_id(area_id)
        return self._map_to_domain(model) if model else None

    async def find_by_location(self, district: str, province: str) -> Optional[Area]:
        stmt = select(AreaModel).where(
            AreaModel.district == district,
            AreaModel.province == province,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def save(self, area: Area) -> None:
        existing = await self._find_model_by_id(area.id)

        try:
            if existing:
                self._update_model(existing, area)
                logger.debug("Updated area: %s", area.id)
            else:
                self._session.add(self._map_to_model(area))
                logger.info("Created area: %s (%s)", area.id, area.district)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise DuplicateAreaError(area.district, area.province) from e
            raise

    async def delete(self, area_id: str) -> bool:
        model = await self._find_model_by_id(area_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted area: %s", area_id)
        return True

    async def find_all(  # NOQA: PLR0913
        self,
        province: Optional[str] = None,
        district: Optional[str] = None,
        area_type: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = 100,
        offset: int = 0,
    ) -> list[Area]:
        stmt = select(AreaModel).order_by(AreaModel.created_at.desc())
        if province:
            stmt = stmt.where(AreaModel.province == province)
        if district:
            stmt = stmt.where(AreaModel.district == district)
        if area_type:
            stmt = stmt.where(AreaModel.area_type == area_type)
        if status:
            stmt = stmt.where(AreaModel.status == status)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count(self, status: Optional[str] = None) -> int:
        stmt = select(func.count(AreaModel.id))
        if status:
            stmt = stmt.where(AreaModel.status == status)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def count_by_province(self) -> dict[str, int]:
        return await self._count_grouped_by(AreaModel.province)

    async def count_by_type(self) -> dict[str, int]:
        return await self._count_grouped_by(AreaModel.area_type)

    async def _count_grouped_by(self, column: Any) -> dict[str, int]:
        stmt = (
            select(column, func.count(AreaModel.id))
            .group_by(column)
            .order_by(func.count(AreaModel.id).desc())
        )
        result = await self._session.execute(stmt)
        return {key: count for key, count in result.all()}

    async def _find_model_by_id(self, area_id: str) -> Optional[AreaModel]:
        stmt = select(AreaModel).where(AreaModel.id == area_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AreaModel) -> Area:
        return Area(
            id=model.id,
            name=model.name,
            district=model.district,
            province=model.province,
            area_type=model.area_type,
            status=model.status,
            infrastructure=InfrastructureAvailability.from_dict(model.infrastructure),
            postal_code=model.postal_code,
            description=model.description,
            created_by=model.created_by,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, area: Area) -> AreaModel:
        model = AreaModel(id=area.id, created_at=area.created_at)
        self._update_model(model, area)
        return model

    @staticmethod
    def _update_model(model: AreaModel, area: Area) -> None:
        model.name = area.name
        model.district = area.district
        model.province = area.province
        model.postal_code = area.postal_code
        model.area_type = area.area_type.value
        model.status = area.status.value
        model.description = area.description
        model.infrastructure = area.infrastructure.to_dict()
        model.created_by = area.created_by
        model.updated_at = area.updated_at
