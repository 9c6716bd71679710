"""Qualification domain exceptions."""

from prodigyhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class QualificationNotFoundError(EntityNotFoundError):
    def __init__(
        self,
        qualification_id: str | None = None,
        message: str | None = None,
    ) -> None:
        self.qualification_id = qualification_id
        super().__init__(
            message
            or f"CheckProductOfferingQualification with id {qualification_id} not found",
            code=ErrorCode.QUALIFICATION_NOT_FOUND,
            details={"qualification_id": qualification_id},
        )


class DuplicateQualificationError(ConflictError):
    def __init__(self, qualification_id: str) -> None:
        self.qualification_id = qualification_id
        super().__init__(
            f"CheckProductOfferingQualification with id {qualification_id} "
            "already exists",
            code=ErrorCode.DUPLICATE_QUALIFICATION,
            details={"qualification_id": qualification_id},
        )


class InvalidLocationError(ValidationError):
    """A location is present but cannot be turned into an address."""

    def __init__(self, message: str, qualification_id: str | None = None) -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_LOCATION,
            details={"qualification_id": qualification_id},
        )
