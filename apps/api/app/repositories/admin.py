"""Repository utilities for administrator persistence."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.admin import Administrator
from app.repositories.base import BaseRepository


class AdministratorRepository(BaseRepository[Administrator]):
    """Data-access helper for administrator accounts."""

    def __init__(self) -> None:
        super().__init__(model=Administrator)

    def get_by_username(self, session: Session, username: str) -> Administrator | None:
        """Return the administrator with exactly this username, if any."""

        statement = select(self.model).where(self.model.username == username)
        result = session.execute(statement)
        return result.scalars().one_or_none()
