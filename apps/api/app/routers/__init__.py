from . import auth, employees, health  # noqa: F401

__all__ = ["auth", "employees", "health"]
