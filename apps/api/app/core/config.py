from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Employee Records API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    database_scheme: str = "postgresql+psycopg"
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "ems_admin"
    database_password: str = "ems_password"
    database_name: str = "employee_management_system"
    database_dsn: str | None = None  # full URL, overrides the parts above

    # Connection pool: callers queue for a free connection up to the timeout
    database_pool_size: int = 10
    database_max_overflow: int = 0
    database_pool_timeout_seconds: int = 30

    jwt_secret_key: str = "CHANGE_ME"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expires_minutes: int = 60 * 24

    login_rate_limit_attempts: int = 5
    login_rate_limit_window_seconds: int = 15 * 60
    rate_limit_trust_forwarded_for: bool = False

    bootstrap_admin_enabled: bool = True
    bootstrap_admin_username: str = "admin"
    bootstrap_admin_password: str = "admin123"

    security_headers_enabled: bool = True

    cors_allowed_origins: str | list[str] = "http://localhost:5173,http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMS_",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Assemble a SQLAlchemy compatible database URL."""
        if self.database_dsn:
            return self.database_dsn
        return (
            f"{self.database_scheme}://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @property
    def resolved_cors_allowed_origins(self) -> list[str]:
        """Return the configured CORS origins as a normalized list."""

        if isinstance(self.cors_allowed_origins, str):
            return [
                origin.strip()
                for origin in self.cors_allowed_origins.split(",")
                if origin.strip()
            ]

        return list(self.cors_allowed_origins)


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
