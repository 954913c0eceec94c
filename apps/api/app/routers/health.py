"""Unauthenticated liveness endpoints."""

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas.common import HealthStatus


router = APIRouter(tags=["Health"])


@router.get("/", response_model=HealthStatus)
@router.get("/health", response_model=HealthStatus)
def read_health(settings: Settings = Depends(get_settings)) -> HealthStatus:
    return HealthStatus(service=settings.app_name, version=settings.app_version)
