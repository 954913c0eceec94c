"""Repository exports."""

from .admin import AdministratorRepository
from .employee import EmployeeRepository

__all__ = [
    "AdministratorRepository",
    "EmployeeRepository",
]
