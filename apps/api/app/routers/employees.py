"""CRUD endpoints for employee records."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.deps import get_current_admin
from app.core.errors import Conflict, NotFound
from app.db import get_db
from app.models.employee import Employee
from app.repositories.employee import EmployeeRepository
from app.schemas.auth import AdminIdentity
from app.schemas.common import MessageResponse
from app.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    EmployeeUpdateResponse,
)

router = APIRouter(
    prefix="/api/employees",
    tags=["Employees"],
    dependencies=[Depends(get_current_admin)],
)
_employee_repository = EmployeeRepository()
logger = logging.getLogger(__name__)

_DUPLICATE_EMAIL = "Employee with this email already exists"
_DUPLICATE_EMAIL_OTHER = "Another employee with this email already exists"


def _get_or_404(db: Session, employee_id: int) -> Employee:
    employee = _employee_repository.get(db, employee_id)
    if employee is None:
        raise NotFound()
    return employee


@router.get("", response_model=list[EmployeeRead])
def list_employees(
    search: str | None = Query(None, description="Match name, email or position"),
    department: str | None = Query(None, description="Exact department name"),
    db: Session = Depends(get_db),
) -> list[EmployeeRead]:
    """Return every employee, most recently created first."""
    employees = _employee_repository.list_recent(db, search=search, department=department)
    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.get("/{employee_id}", response_model=EmployeeRead)
def get_employee(employee_id: int, db: Session = Depends(get_db)) -> EmployeeRead:
    return EmployeeRead.model_validate(_get_or_404(db, employee_id))


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin),
) -> EmployeeRead:
    """Create a new employee; the email must not be in use yet."""
    if _employee_repository.get_by_email(db, payload.email) is not None:
        raise Conflict(_DUPLICATE_EMAIL)

    try:
        employee = _employee_repository.create(db, data=payload.model_dump())
        db.commit()
    except IntegrityError as exc:
        # Lost a race against a concurrent write of the same email
        db.rollback()
        logger.info("Unique constraint rejected employee email %r", payload.email)
        raise Conflict(_DUPLICATE_EMAIL) from exc

    db.refresh(employee)
    logger.info("Employee %d created by %s", employee.id, admin.username)
    return EmployeeRead.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeUpdateResponse)
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin),
) -> EmployeeUpdateResponse:
    """Replace every mutable field of an existing employee."""
    employee = _get_or_404(db, employee_id)

    if _employee_repository.get_by_email(db, payload.email, exclude_id=employee_id) is not None:
        raise Conflict(_DUPLICATE_EMAIL_OTHER)

    try:
        updated = _employee_repository.update(db, employee, data=payload.model_dump())
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Unique constraint rejected employee email %r", payload.email)
        raise Conflict(_DUPLICATE_EMAIL_OTHER) from exc

    db.refresh(updated)
    logger.info("Employee %d updated by %s", updated.id, admin.username)
    return EmployeeUpdateResponse(employee=EmployeeRead.model_validate(updated))


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin),
) -> MessageResponse:
    """Permanently remove an employee record."""
    employee = _get_or_404(db, employee_id)
    _employee_repository.delete(db, employee)
    db.commit()
    logger.info("Employee %d deleted by %s", employee_id, admin.username)
    return MessageResponse(message="Employee deleted successfully")
