"""Error hierarchy shared by every ProdigyHub domain.

Each exception carries a stable ``ErrorCode``; the API maps codes to HTTP
statuses in one place and returns ``{"detail", "code"}`` bodies, so the
domain never knows about HTTP.
"""

from enum import Enum
from typing import Any, ClassVar, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to API clients."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    INVALID_LOCATION = "INVALID_LOCATION"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    QUALIFICATION_NOT_FOUND = "QUALIFICATION_NOT_FOUND"
    AREA_NOT_FOUND = "AREA_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_AREA = "DUPLICATE_AREA"
    DUPLICATE_QUALIFICATION = "DUPLICATE_QUALIFICATION"

    # 422
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class of all ProdigyHub domain errors.

    Attributes
    ----------
    message
        Text safe to show to API clients
    code
        Stable error code; defaults to the subclass's ``default_code``
    details
        Extra context for logs, never sent to clients
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input that can never be accepted as given."""

    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The request collides with stored state (duplicates)."""

    default_code = ErrorCode.CONFLICT
