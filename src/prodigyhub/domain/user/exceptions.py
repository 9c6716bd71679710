"""User domain exceptions."""

from prodigyhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address does not have a valid format."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class InvalidAddressError(ValidationError):
    """Raised when a supplied address misses required parts."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(
            f"Address is missing required fields: {', '.join(missing_fields)}",
            code=ErrorCode.INVALID_ADDRESS,
            details={"missing_fields": missing_fields},
        )


class WeakPasswordError(ValidationError):
    """Password does not meet the strength requirements."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.WEAK_PASSWORD)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User with email {email} already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )
