"""Repository factory protocol for application layer."""

from typing import Any, Protocol

from prodigyhub.domain.area import AreaRepository
from prodigyhub.domain.qualification import QualificationRepository
from prodigyhub.domain.user import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories that share one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def qualification_repository(self) -> QualificationRepository:
        """Get qualification repository."""
        ...

    def area_repository(self) -> AreaRepository:
        """Get area repository."""
        ...
