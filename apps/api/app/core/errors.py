"""Domain error hierarchy shared by the auth gate and the employee API.

Every error carries an HTTP status and a machine-checkable ``kind`` so the
global handlers can render one response envelope for all failure modes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class EmployeeRecordsError(Exception):
    """Base class for errors that map onto a structured API response."""

    status_code: int = 500
    kind: str = "internal"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, headers: dict[str, str] | None = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "kind": self.kind}


class Unauthorized(EmployeeRecordsError):
    status_code = 401
    kind = "unauthorized"
    default_message = "Access token required"


class Forbidden(EmployeeRecordsError):
    status_code = 403
    kind = "forbidden"
    default_message = "Invalid or expired token"


class ValidationFailed(EmployeeRecordsError):
    status_code = 400
    kind = "validation_failed"
    default_message = "Validation failed"

    def __init__(
        self,
        violations: list[FieldViolation],
        message: str | None = None,
    ):
        super().__init__(message)
        self.violations = list(violations)

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        body["details"] = [violation.to_dict() for violation in self.violations]
        return body


class Conflict(EmployeeRecordsError):
    status_code = 409
    kind = "conflict"
    default_message = "Employee with this email already exists"


class NotFound(EmployeeRecordsError):
    status_code = 404
    kind = "not_found"
    default_message = "Employee not found"


class TooManyRequests(EmployeeRecordsError):
    status_code = 429
    kind = "too_many_requests"
    default_message = "Too many authentication attempts, please try again later."


class Internal(EmployeeRecordsError):
    status_code = 500
    kind = "internal"
    default_message = "Internal server error"
