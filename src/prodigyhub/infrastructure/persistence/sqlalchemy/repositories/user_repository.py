"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Any, Optional, Union
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from prodigyhub.domain.shared.time import ensure_tz_aware
from prodigyhub.domain.user import (
    Address,
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
    UserStatus,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _without_address_clause() -> Any:
    return or_(UserModel.address_district.is_(None), UserModel.address_district == "")


def _with_address_clause() -> Any:
    return UserModel.address_district.is_not(None) & (UserModel.address_district != "")


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user_id: UUID) -> bool:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user: %s", user_id)
        return True

    async def find_all(
        self,
        status: Optional[UserStatus] = None,
        district: Optional[str] = None,
        province: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at.desc())
        if status is not None:
            stmt = stmt.where(UserModel.status == status.value)
        if district:
            stmt = stmt.where(UserModel.address_district == district)
        if province:
            stmt = stmt.where(UserModel.address_province == province)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_most_recent_without_address(self) -> Optional[User]:
        stmt = (
            select(UserModel)
            .where(_without_address_clause())
            .order_by(UserModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_most_recent(self) -> Optional[User]:
        stmt = select(UserModel).order_by(UserModel.created_at.desc()).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(UserModel.id)))
        return result.scalar_one()

    async def count_with_address(self) -> int:
        stmt = select(func.count(UserModel.id)).where(_with_address_clause())
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def count_by_status(self) -> dict[str, int]:
        stmt = select(UserModel.status, func.count(UserModel.id)).group_by(
            UserModel.status,
        )
        result = await self._session.execute(stmt)
        return {status: count for status, count in result.all()}

    async def count_by_province(self) -> dict[str, int]:
        return await self._count_grouped_by(UserModel.address_province)

    async def count_by_district(self) -> dict[str, int]:
        return await self._count_grouped_by(UserModel.address_district)

    async def _count_grouped_by(self, column: Any) -> dict[str, int]:
        stmt = (
            select(column, func.count(UserModel.id))
            .where(column.is_not(None), column != "")
            .group_by(column)
            .order_by(func.count(UserModel.id).desc())
        )
        result = await self._session.execute(stmt)
        return {key: count for key, count in result.all()}

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        address = None
        address_columns = (
            model.address_street,
            model.address_city,
            model.address_district,
            model.address_province,
            model.address_postal_code,
        )
        if any(value is not None for value in address_columns):
            address = Address(
                street=model.address_street or "",
                city=model.address_city or "",
                district=model.address_district or "",
                province=model.address_province or "",
                postal_code=model.address_postal_code or "",
            )

        return User.reconstitute(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            phone_number=model.phone_number,
            password_hash=model.password_hash,
            status=model.status,
            address=address,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone_number=user.phone_number,
            password_hash=user.password_hash,
            status=user.status.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._apply_address(model, user.address)
        return model

    def _update_model(self, model: UserModel, user: User) -> None:
        # Note: id never changes.
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.phone_number = user.phone_number
        model.password_hash = user.password_hash
        model.status = user.status.value
        self._apply_address(model, user.address)
        model.updated_at = user.updated_at

    @staticmethod
    def _apply_address(model: UserModel, address: Optional[Address]) -> None:
        if address is None:
            model.address_street = None
            model.address_city = None
            model.address_district = None
            model.address_province = None
            model.address_postal_code = None
            return
        model.address_street = address.street
        model.address_city = address.city
        model.address_district = address.district
        model.address_province = address.province
        model.address_postal_code = address.postal_code
