"""Shared fixtures: in-memory SQLite, a fresh login limiter and auth headers."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings
from app.core.deps import get_login_rate_limiter
from app.core.rate_limit import LoginRateLimiter
from app.core.security import create_access_token, create_password_hash
from app.db import get_db
from app.db.base import Base
from app.main import app
from app.models.admin import Administrator

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


def make_session_local() -> sessionmaker[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def session_local() -> sessionmaker[Session]:
    return make_session_local()


@pytest.fixture()
def login_limiter() -> LoginRateLimiter:
    settings = get_settings()
    return LoginRateLimiter(
        settings.login_rate_limit_attempts, settings.login_rate_limit_window_seconds
    )


@pytest.fixture()
def client(
    session_local: sessionmaker[Session], login_limiter: LoginRateLimiter
) -> Iterator[TestClient]:
    def override_get_db():
        with session_local() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_login_rate_limiter] = lambda: login_limiter

    yield TestClient(app)

    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_login_rate_limiter, None)


@pytest.fixture()
def admin(session_local: sessionmaker[Session]) -> Administrator:
    with session_local() as session:
        admin = Administrator(
            username=ADMIN_USERNAME,
            # Low cost factor keeps the suite fast; verification reads it from the hash
            hashed_password=create_password_hash(ADMIN_PASSWORD, rounds=4),
        )
        session.add(admin)
        session.commit()
        session.refresh(admin)
        return admin


@pytest.fixture()
def auth_headers(admin: Administrator) -> dict[str, str]:
    token = create_access_token(
        secret_key=get_settings().jwt_secret_key,
        subject=str(admin.id),
        expires_delta=timedelta(hours=24),
        additional_claims={"id": admin.id, "username": admin.username},
    )
    return {"Authorization": f"Bearer {token}"}


def employee_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
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
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_payload():
    return employee_payload
