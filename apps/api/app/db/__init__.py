"""Database helpers and base objects."""

from .base import Base, metadata
from .session import SessionLocal, build_engine, engine, get_db

__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "engine",
    "get_db",
    "metadata",
]
