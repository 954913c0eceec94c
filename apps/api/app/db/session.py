from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings, get_settings


settings = get_settings()


def build_engine(active_settings: Settings):
    """Create the engine with a bounded connection pool for server databases."""

    url = make_url(active_settings.database_url)
    options: dict[str, object] = {"echo": False, "future": True}
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=active_settings.database_pool_size,
            max_overflow=active_settings.database_max_overflow,
            pool_timeout=active_settings.database_pool_timeout_seconds,
            pool_pre_ping=True,
        )
    return create_engine(url, **options)


engine = build_engine(settings)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Provide a SQLAlchemy session scoped to the request lifecycle."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
