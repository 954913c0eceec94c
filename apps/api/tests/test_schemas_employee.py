"""Unit tests for employee payload validation rules."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.error_handlers import violations_from_errors
from app.schemas.employee import EmployeeCreate


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "position": "Engineer",
        "department": "Research",
        "salary": 1000,
        "hire_date": "2024-01-15",
    }
    payload.update(overrides)
    return payload


def test_minimal_payload_is_valid() -> None:
    employee = EmployeeCreate.model_validate(_payload())

    assert employee.salary == Decimal("1000")
    assert employee.hire_date == date(2024, 1, 15)
    assert employee.phone is None
    assert employee.address is None


def test_email_is_lower_cased() -> None:
    employee = EmployeeCreate.model_validate(_payload(email="Ada.Lovelace@Example.COM"))

    assert employee.email == "ada.lovelace@example.com"


def test_overlong_email_rejected() -> None:
    local_part = "a" * 60
    domain = "b" * 40 + ".com"

    with pytest.raises(ValidationError):
        EmployeeCreate.model_validate(_payload(email=f"{local_part}@{domain}"))


@pytest.mark.parametrize("salary", [0, "0", "12.5", "99999999.99"])
def test_non_negative_salaries_accepted(salary: object) -> None:
    EmployeeCreate.model_validate(_payload(salary=salary))


@pytest.mark.parametrize(
    ("salary", "stored"),
    [
        ("1.234", Decimal("1.23")),
        ("50000.125", Decimal("50000.13")),
        (50000.125, Decimal("50000.13")),
        ("99999999.994", Decimal("99999999.99")),
    ],
)
def test_extra_salary_precision_rounds_to_cents(salary: object, stored: Decimal) -> None:
    assert EmployeeCreate.model_validate(_payload(salary=salary)).salary == stored


@pytest.mark.parametrize(
    "salary", [-0.01, "abc", None, "NaN", "100000000", "99999999.995", "1e40"]
)
def test_invalid_salaries_rejected(salary: object) -> None:
    with pytest.raises(ValidationError):
        EmployeeCreate.model_validate(_payload(salary=salary))


@pytest.mark.parametrize("phone", ["555-0100", "+1 (555) 010 2030", "0044 20 7946 0958"])
def test_lenient_phone_numbers_accepted(phone: str) -> None:
    assert EmployeeCreate.model_validate(_payload(phone=phone)).phone == phone


@pytest.mark.parametrize("phone", ["555-CALL", "12345678901234567890123", "ext. 12"])
def test_non_phone_strings_rejected(phone: str) -> None:
    with pytest.raises(ValidationError):
        EmployeeCreate.model_validate(_payload(phone=phone))


@pytest.mark.parametrize(
    "hire_date",
    [
        "2023-02-29",
        "2024-13-01",
        "yesterday",
        "",
        1704067200,
        0,
        "1704067200",
        "2024-01-01T00:00:00",
        "2024-1-5",
        datetime(2024, 1, 1),
    ],
)
def test_invalid_hire_dates_rejected(hire_date: object) -> None:
    with pytest.raises(ValidationError):
        EmployeeCreate.model_validate(_payload(hire_date=hire_date))


def test_violations_collapse_to_one_per_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        EmployeeCreate.model_validate({"first_name": "", "salary": -5})

    violations = violations_from_errors(exc_info.value.errors())

    fields = [violation.field for violation in violations]
    assert len(fields) == len(set(fields))
    assert {"first_name", "last_name", "email", "salary", "hire_date"} <= set(fields)
    assert next(v for v in violations if v.field == "first_name").message.startswith(
        "First name is required"
    )
