"""Database access helpers for employee records."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.models.employee import Employee
from app.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for interacting with employee records.

    Methods flush but never commit; the caller owns the transaction so a
    unique-constraint failure can be rolled back as a whole.
    """

    def __init__(self) -> None:
        super().__init__(model=Employee)

    def list_recent(
        self,
        session: Session,
        *,
        search: str | None = None,
        department: str | None = None,
    ) -> list[Employee]:
        """Return employees newest first, optionally filtered."""
        statement = select(Employee)

        if search:
            pattern = f"%{search.strip()}%"
            full_name = Employee.first_name + " " + Employee.last_name
            statement = statement.where(
                or_(
                    Employee.first_name.ilike(pattern),
                    Employee.last_name.ilike(pattern),
                    full_name.ilike(pattern),
                    Employee.email.ilike(pattern),
                    Employee.position.ilike(pattern),
                )
            )

        if department:
            statement = statement.where(Employee.department == department)

        statement = statement.order_by(Employee.created_at.desc(), Employee.id.desc())
        return list(session.scalars(statement).all())

    def get_by_email(
        self,
        session: Session,
        email: str,
        *,
        exclude_id: int | None = None,
    ) -> Employee | None:
        """Fetch the employee holding ``email``, ignoring ``exclude_id``."""
        statement = select(Employee).where(func.lower(Employee.email) == email.lower())
        if exclude_id is not None:
            statement = statement.where(Employee.id != exclude_id)
        return session.scalars(statement).first()

    def create(self, session: Session, *, data: dict[str, object]) -> Employee:
        employee = Employee(**data)
        return self.add(session, employee)

    def update(
        self, session: Session, employee: Employee, *, data: dict[str, object]
    ) -> Employee:
        """Overwrite every supplied field and stamp ``updated_at``."""
        for field, value in data.items():
            setattr(employee, field, value)
        employee.updated_at = datetime.now(timezone.utc)
        session.flush()
        session.refresh(employee)
        return employee
