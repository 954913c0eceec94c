"""Pydantic schemas for authentication workflows."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


class LoginRequest(BaseModel):
    """Credentials payload submitted to the login endpoint."""

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
    password: str = Field(..., min_length=1)


class AdminIdentity(BaseModel):
    """Identity decoded from a valid access token."""

    id: int
    username: str

    model_config = ConfigDict(from_attributes=True, frozen=True)


class TokenResponse(BaseModel):
    """Signed token returned to the caller after a successful login."""

    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    expires_in: int
    user: AdminIdentity


class VerifyResponse(BaseModel):
    valid: bool = True
    user: AdminIdentity
