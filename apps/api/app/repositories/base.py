"""Generic persistence operations shared by the concrete repositories."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """Thin wrapper over a SQLAlchemy session for one mapped model."""

    def __init__(self, model: type[ModelT]):
        self._model = model

    @property
    def model(self) -> type[ModelT]:
        return self._model

    def add(self, session: Session, instance: ModelT) -> ModelT:
        """Insert ``instance`` and reload server-generated columns."""

        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def get(self, session: Session, identifier: int) -> ModelT | None:
        return session.get(self._model, identifier)

    def count(self, session: Session) -> int:
        statement = select(func.count()).select_from(self._model)
        return session.execute(statement).scalar() or 0

    def delete(self, session: Session, instance: ModelT) -> None:
        """Remove ``instance`` permanently within the current transaction."""

        session.delete(instance)
        session.flush()
