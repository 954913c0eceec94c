"""Security helpers for password hashing and JWT generation."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

import bcrypt

_BCRYPT_ROUNDS = 12
_BCRYPT_MAX_BYTES = 72
_SUPPORTED_ALGORITHM = "HS256"


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _password_bytes(password: str) -> bytes:
    encoded = password.encode("utf-8")
    # bcrypt only looks at the first 72 bytes
    if len(encoded) > _BCRYPT_MAX_BYTES:
        encoded = hashlib.sha256(encoded).hexdigest().encode("ascii")
    return encoded


def create_password_hash(password: str, *, rounds: int = _BCRYPT_ROUNDS) -> str:
    """Hash a password using salted bcrypt."""

    if not password:
        raise ValueError("Password must not be empty")

    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, stored_hash: str) -> bool:
    """Validate a password against the stored bcrypt hash."""

    try:
        return bcrypt.checkpw(_password_bytes(password), stored_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def _dummy_hash() -> str:
    return create_password_hash("not-a-real-password")


def burn_password_check(password: str) -> None:
    """Spend the same bcrypt work as a real check when no account matched."""

    verify_password(password, _dummy_hash())


def create_access_token(
    *,
    secret_key: str,
    subject: str,
    expires_delta: timedelta,
    issued_at: datetime | None = None,
    additional_claims: dict[str, Any] | None = None,
) -> str:
    """Generate a signed HS256 JWT for the provided subject."""

    now = issued_at or datetime.now(timezone.utc)
    expires = now + expires_delta

    header = {"alg": _SUPPORTED_ALGORITHM, "typ": "JWT"}
    payload: dict[str, Any] = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    if additional_claims:
        payload.update(additional_claims)

    header_segment = _b64encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_segment = _b64encode(
        json.dumps(payload, separators=(",", ":")).encode("utf-8")
    )

    signing_input = f"{header_segment}.{payload_segment}".encode("ascii")
    signature = hmac.new(secret_key.encode("utf-8"), signing_input, hashlib.sha256).digest()
    signature_segment = _b64encode(signature)

    return f"{header_segment}.{payload_segment}.{signature_segment}"


def decode_access_token(
    token: str, *, secret_key: str, now: datetime | None = None
) -> dict[str, Any]:
    """Decode and validate a JWT created by ``create_access_token``.

    Raises ``ValueError`` for any structural, signature or expiry problem.
    """

    parts = token.split(".")
    if len(parts) != 3:
        raise ValueError("Token structure invalid")

    header_segment, payload_segment, signature_segment = parts
    try:
        header = json.loads(_b64decode(header_segment))
    except json.JSONDecodeError as exc:
        raise ValueError("Token header malformed") from exc
    if not isinstance(header, dict) or header.get("alg") != _SUPPORTED_ALGORITHM:
        raise ValueError("Token algorithm unsupported")

    signing_input = f"{header_segment}.{payload_segment}".encode("ascii")
    expected_signature = hmac.new(
        secret_key.encode("utf-8"), signing_input, hashlib.sha256
    ).digest()
    provided_signature = _b64decode(signature_segment)
    if not hmac.compare_digest(provided_signature, expected_signature):
        raise ValueError("Token signature mismatch")

    try:
        payload_data = json.loads(_b64decode(payload_segment))
    except json.JSONDecodeError as exc:
        raise ValueError("Token payload malformed") from exc
    if not isinstance(payload_data, dict):
        raise ValueError("Token payload malformed")

    exp = payload_data.get("exp")
    if not isinstance(exp, (int, float)):
        raise ValueError("Token missing expiration")
    current = now or datetime.now(timezone.utc)
    if int(current.timestamp()) >= int(exp):
        raise ValueError("Token expired")

    return payload_data
