"""Translate exceptions into ``{"detail": ..., "code": ...}`` responses.

Domain errors keep their own message and code. Request validation
failures become 400 ``VALIDATION_ERROR`` (TMF clients expect 400, not
FastAPI's default 422). Anything else is a 500 whose cause is only
logged.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prodigyhub.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

_BAD_REQUEST = status.HTTP_400_BAD_REQUEST
_NOT_FOUND = status.HTTP_404_NOT_FOUND
_CONFLICT = status.HTTP_409_CONFLICT

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: _BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: _BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: _BAD_REQUEST,
    ErrorCode.INVALID_ADDRESS: _BAD_REQUEST,
    ErrorCode.INVALID_LOCATION: _BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: _BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: _NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: _NOT_FOUND,
    ErrorCode.QUALIFICATION_NOT_FOUND: _NOT_FOUND,
    ErrorCode.AREA_NOT_FOUND: _NOT_FOUND,
    ErrorCode.CONFLICT: _CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: _CONFLICT,
    ErrorCode.DUPLICATE_AREA: _CONFLICT,
    ErrorCode.DUPLICATE_QUALIFICATION: _CONFLICT,
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_CONTENT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Used when a code has no entry above; first matching base class wins
_STATUS_BY_TYPE: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, _NOT_FOUND),
    (ConflictError, _CONFLICT),
    (ValidationError, _BAD_REQUEST),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_CONTENT),
)


def status_for(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for exc_type, status_code in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return _BAD_REQUEST


def error_response(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
    )


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """``"body.location.district: Field required; ..."``, one part per error."""
    parts = []
    for error in errors:
        where = ".".join(str(p) for p in error.get("loc", ()))
        what = error.get("msg", "Invalid value")
        parts.append(f"{where}: {what}" if where else what)
    return "; ".join(parts) or "Invalid request"


async def _handle_domain_exception(
    request: Request,
    exc: DomainException,
) -> JSONResponse:
    logger.warning(
        "%s %s -> %s: %s %s",
        request.method,
        request.url.path,
        exc.code.value,
        exc.message,
        exc.details or "",
    )
    return error_response(status_for(exc), exc.message, exc.code)


async def _handle_request_validation(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    detail = describe_validation_errors(exc.errors())
    logger.info("%s %s -> invalid request: %s", request.method, request.url.path, detail)
    return error_response(_BAD_REQUEST, detail, ErrorCode.VALIDATION_ERROR)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred",
        ErrorCode.INTERNAL_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain, validation and catch-all handlers on ``app``."""
    app.add_exception_handler(DomainException, _handle_domain_exception)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
