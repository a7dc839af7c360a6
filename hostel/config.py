"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # ==========================================================================
    # Environment
    # ==========================================================================

    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # ==========================================================================
    # API Server
    # ==========================================================================

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_origins: str = "http://localhost:3000"
    secret_key: str = "hostel-management-secret"

    # ==========================================================================
    # Storage
    # ==========================================================================

    # One JSON array file per collection lives here
    data_dir: Path = Path("./data")

    # ==========================================================================
    # Sessions & Authentication
    # ==========================================================================

    session_cookie_name: str = "hostel_session"
    session_ttl_hours: int = 24
    session_cookie_secure: bool = False  # set to true behind https

    bcrypt_rounds: int = 10

    # Pages. The gates redirect to `login_page`; the default is served from
    # `static_dir` like the dashboards. Point it elsewhere if the login page
    # is hosted outside this app.
    login_page: str = "/login.html"
    static_dir: Path = Path("./public")

    # ==========================================================================
    # Optional Services
    # ==========================================================================

    sentry_dsn: str = ""

    # ==========================================================================
    # Helpers
    # ==========================================================================

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(hours=self.session_ttl_hours)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
