from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.area_repository import (
    AreaRepositorySQLAlchemy,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.qualification_repository import (
    QualificationRepositorySQLAlchemy,
)
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AreaRepositorySQLAlchemy",
    "QualificationRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
