"""Database models package."""

from .admin import Administrator
from .employee import Employee

__all__ = ["Administrator", "Employee"]
