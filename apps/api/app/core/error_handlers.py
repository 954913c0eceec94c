"""Global exception handlers rendering one error envelope for every failure.

Envelope: ``{"error": <message>, "kind": <kind>, "details": [...]}``, where
``details`` only appears on validation failures.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import (
    EmployeeRecordsError,
    FieldViolation,
    Forbidden,
    Internal,
    NotFound,
    TooManyRequests,
    Unauthorized,
    ValidationFailed,
)
from app.schemas.employee import EMPLOYEE_FIELD_MESSAGES

logger = logging.getLogger(__name__)

_FIELD_MESSAGES: dict[str, str] = {
    **EMPLOYEE_FIELD_MESSAGES,
    "username": "Username is required",
    "password": "Password is required",
}

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

_STATUS_ERRORS: dict[int, type[EmployeeRecordsError]] = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    429: TooManyRequests,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    app.add_exception_handler(EmployeeRecordsError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(SQLAlchemyError, _storage_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def _render(exc: EmployeeRecordsError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(),
        headers=exc.headers,
    )


async def _domain_error_handler(request: Request, exc: EmployeeRecordsError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return _render(exc)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    violations = violations_from_errors(exc.errors())
    logger.info(
        "Validation failed on %s: %s",
        request.url.path,
        ", ".join(violation.field for violation in violations),
    )
    message = "Invalid input" if request.url.path.startswith("/api/auth") else None
    return _render(ValidationFailed(violations, message=message))


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error_class = _STATUS_ERRORS.get(exc.status_code)
    if error_class is not None:
        error = error_class(str(exc.detail))
    else:
        error = EmployeeRecordsError(str(exc.detail))
        error.status_code = exc.status_code
        error.kind = "http_error"
    error.headers = getattr(exc, "headers", None)
    return _render(error)


async def _storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Storage failure on %s", request.url.path, exc_info=exc)
    return _render(Internal("Database operation failed"))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return _render(Internal())


def violations_from_errors(errors: list[dict]) -> list[FieldViolation]:
    """Collapse pydantic errors into one violation per field, in input order."""

    violations: dict[str, FieldViolation] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if len(location) > 1 and location[0] in _LOCATION_PREFIXES:
            location = location[1:]
        field = ".".join(location) or "body"
        if field in violations:
            continue
        message = _FIELD_MESSAGES.get(field, error.get("msg", "Invalid value"))
        violations[field] = FieldViolation(field=field, message=message)
    return list(violations.values())
