from prodigyhub.domain.qualification.repositories.qualification_repository import (
    QualificationRepository,
)

__all__ = ["QualificationRepository"]
