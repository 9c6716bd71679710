"""SQLAlchemy models. Importing this package registers all tables."""

from prodigyhub.infrastructure.persistence.sqlalchemy.models.area_model import (
    AreaModel,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.models.qualification_model import (
    QualificationModel,
    QualificationNoteModel,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "AreaModel",
    "Base",
    "QualificationModel",
    "QualificationNoteModel",
    "TimestampMixin",
    "UserModel",
]
