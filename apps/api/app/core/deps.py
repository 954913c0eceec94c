"""FastAPI dependencies for the authentication gate and login throttling."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings
from app.core.errors import Forbidden, TooManyRequests, Unauthorized
from app.core.rate_limit import LoginRateLimiter, retry_after_header
from app.core.security import decode_access_token
from app.schemas.auth import AdminIdentity

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


def identity_from_token(
    token: str, *, secret_key: str, now: datetime | None = None
) -> AdminIdentity:
    """Turn a bearer token into an identity or raise ``Forbidden``."""

    try:
        payload = decode_access_token(token, secret_key=secret_key, now=now)
    except ValueError as exc:
        logger.info("Rejected access token: %s", exc)
        raise Forbidden() from exc

    admin_id = payload.get("id")
    username = payload.get("username")
    if isinstance(admin_id, bool) or not isinstance(admin_id, int) or not isinstance(username, str):
        logger.info("Rejected access token: identity claims missing")
        raise Forbidden()

    return AdminIdentity(id=admin_id, username=username)


def get_current_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> AdminIdentity:
    """Require a valid bearer token and attach the caller to the request."""

    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    identity = identity_from_token(
        credentials.credentials,
        secret_key=settings.jwt_secret_key,
        now=datetime.now(timezone.utc),
    )
    request.state.admin = identity
    return identity


def get_login_rate_limiter(request: Request) -> LoginRateLimiter:
    """Return the limiter created by the application lifespan."""

    return request.app.state.login_rate_limiter


def client_origin(request: Request, settings: Settings) -> str:
    if settings.rate_limit_trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client is not None:
        return request.client.host
    return "unknown"


def enforce_login_rate_limit(
    request: Request,
    limiter: LoginRateLimiter = Depends(get_login_rate_limiter),
    settings: Settings = Depends(get_settings),
) -> None:
    """Count a login attempt and refuse it once the origin's budget is spent."""

    retry_after = limiter.hit(client_origin(request, settings))
    if retry_after is not None:
        raise TooManyRequests(headers=retry_after_header(retry_after))
