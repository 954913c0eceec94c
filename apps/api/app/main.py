import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from app.core.config import get_settings
from app.core.error_handlers import register_error_handlers
from app.core.middleware import SecurityHeadersMiddleware
from app.core.rate_limit import LoginRateLimiter
from app.db import SessionLocal
from app.routers import auth, employees, health
from app.scripts.create_admin import ensure_default_admin


logger = logging.getLogger(__name__)
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def bootstrap_admin() -> None:
    """Provision the default administrator when the admins table is empty."""

    with SessionLocal() as session:
        ensure_default_admin(
            session,
            username=settings.bootstrap_admin_username,
            password=settings.bootstrap_admin_password,
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.bootstrap_admin_enabled:
        await run_in_threadpool(bootstrap_admin)
    limiter = LoginRateLimiter.from_settings(settings)
    app.state.login_rate_limiter = limiter
    try:
        yield
    finally:
        limiter.close()


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.resolved_cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.security_headers_enabled:
    app.add_middleware(SecurityHeadersMiddleware)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(employees.router)
app.include_router(health.router)
