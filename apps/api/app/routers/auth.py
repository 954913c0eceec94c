"""Authentication endpoints for the Employee Records API."""

from __future__ import annotations

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.deps import enforce_login_rate_limit, get_current_admin
from app.core.errors import Unauthorized
from app.core.security import burn_password_check, create_access_token, verify_password
from app.db import get_db
from app.repositories.admin import AdministratorRepository
from app.schemas.auth import AdminIdentity, LoginRequest, TokenResponse, VerifyResponse

router = APIRouter(prefix="/api/auth", tags=["Auth"])
_admin_repository = AdministratorRepository()
logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials"


@router.post(
    "/login",
    response_model=TokenResponse,
    dependencies=[Depends(enforce_login_rate_limit)],
)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Authenticate an administrator and return a signed access token."""

    admin = _admin_repository.get_by_username(db, payload.username)
    if admin is None:
        burn_password_check(payload.password)
        logger.warning("Failed login attempt for username %r", payload.username)
        raise Unauthorized(_INVALID_CREDENTIALS)
    if not verify_password(payload.password, admin.hashed_password):
        logger.warning("Failed login attempt for username %r", payload.username)
        raise Unauthorized(_INVALID_CREDENTIALS)

    expires_delta = timedelta(minutes=settings.jwt_access_token_expires_minutes)
    token = create_access_token(
        secret_key=settings.jwt_secret_key,
        subject=str(admin.id),
        expires_delta=expires_delta,
        additional_claims={"id": admin.id, "username": admin.username},
    )
    logger.info("Administrator %r logged in", admin.username)
    return TokenResponse(
        token=token,
        expires_in=int(expires_delta.total_seconds()),
        user=AdminIdentity.model_validate(admin),
    )


@router.post("/verify", response_model=VerifyResponse)
def verify(admin: AdminIdentity = Depends(get_current_admin)) -> VerifyResponse:
    """Confirm the bearer token is valid and echo the identity it carries."""

    return VerifyResponse(user=admin)
