"""Pydantic schemas used by the FastAPI application."""

from .auth import AdminIdentity, LoginRequest, TokenResponse, VerifyResponse
from .common import HealthStatus, MessageResponse
from .employee import (
    EMPLOYEE_FIELD_MESSAGES,
    EmployeeBase,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    EmployeeUpdateResponse,
)

__all__ = [
    # Auth schemas
    "AdminIdentity",
    "LoginRequest",
    "TokenResponse",
    "VerifyResponse",
    # Employee schemas
    "EMPLOYEE_FIELD_MESSAGES",
    "EmployeeBase",
    "EmployeeCreate",
    "EmployeeRead",
    "EmployeeUpdate",
    "EmployeeUpdateResponse",
    # Shared
    "HealthStatus",
    "MessageResponse",
]
