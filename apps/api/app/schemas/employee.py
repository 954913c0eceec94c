"""Pydantic schemas for employee record payloads."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    field_validator,
)

EMAIL_MAX_LENGTH = 100
# Deliberately lenient: digits, spaces, dashes, parentheses and plus signs
PHONE_PATTERN = r"^[0-9+()\-\s]+$"
HIRE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# Fits NUMERIC(10, 2)
SALARY_LIMIT = Decimal("100000000")
CENT = Decimal("0.01")

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]

# Human readable messages reported for each field, whatever rule it broke
EMPLOYEE_FIELD_MESSAGES: dict[str, str] = {
    "first_name": "First name is required and must be at most 50 characters",
    "last_name": "Last name is required and must be at most 50 characters",
    "email": "Valid email is required",
    "position": "Position is required and must be at most 100 characters",
    "department": "Department is required and must be at most 100 characters",
    "salary": "Salary must be a non-negative number",
    "hire_date": "Valid hire date is required",
    "phone": "Valid phone number required",
    "address": "Address must be at most 200 characters",
}


class EmployeeBase(BaseModel):
    """Full employee record as supplied by the client on create and update."""

    first_name: NameStr
    last_name: NameStr
    email: EmailStr
    position: TitleStr
    department: TitleStr
    salary: Decimal = Field(..., ge=0)
    hire_date: date
    phone: str | None = Field(default=None, max_length=20, pattern=PHONE_PATTERN)
    address: str | None = Field(default=None, max_length=200)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
                "position": "Engineer",
                "department": "Research",
                "salary": "85000.00",
                "hire_date": "2024-01-15",
                "phone": "+1 (555) 010-2030",
                "address": "12 Analytical Row",
            }
        }
    )

    @field_validator("phone", "address", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("hire_date", mode="before")
    @classmethod
    def _calendar_date_only(cls, value: object) -> object:
        """Accept ``YYYY-MM-DD`` strings, never timestamps or datetimes."""
        if isinstance(value, datetime):
            raise ValueError("Hire date must not carry a time")
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not HIRE_DATE_PATTERN.match(value.strip()):
            raise ValueError("Hire date must be formatted as YYYY-MM-DD")
        return value.strip()

    @field_validator("salary", mode="after")
    @classmethod
    def _round_salary(cls, value: Decimal) -> Decimal:
        if value >= SALARY_LIMIT:
            raise ValueError("Salary exceeds the storable range")
        rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
        if rounded >= SALARY_LIMIT:
            raise ValueError("Salary exceeds the storable range")
        return rounded

    @field_validator("email", mode="after")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if len(normalized) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        return normalized


class EmployeeCreate(EmployeeBase):
    """Payload for creating a new employee record."""


class EmployeeUpdate(EmployeeBase):
    """Payload replacing every mutable field of an existing employee."""


class EmployeeRead(EmployeeBase):
    """Representation returned by the API for persisted employee records."""

    # Stored values are trusted; skip the input-side email checks
    email: str
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EmployeeUpdateResponse(BaseModel):
    message: str = "Employee updated successfully"
    employee: EmployeeRead
