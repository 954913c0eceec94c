"""Small response envelopes shared across routers."""

from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str = "ok"
    service: str
    version: str
