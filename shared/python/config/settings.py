"""
Configuration Management Module

Environment-based configuration with validation using Pydantic Settings.

All services load settings from environment variables defined in .env file.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All configuration is centralized here to prevent hardcoded values
    scattered throughout the codebase.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra environment variables
    )

    # =============================================================================
    # PLATFORM IDENTITY
    # =============================================================================
    PLATFORM_NAME: str = Field(default="Marketplace Search", description="Platform name for UI and API")

    # =============================================================================
    # ENVIRONMENT
    # =============================================================================
    ENVIRONMENT: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Logging format: json or console")

    # =============================================================================
    # DATABASE (PostgreSQL)
    # =============================================================================
    POSTGRES_HOST: str = Field(default="postgres", description="PostgreSQL host")
    POSTGRES_PORT: int = Field(default=5432, description="PostgreSQL port")
    POSTGRES_DB: str = Field(default="marketplace", description="PostgreSQL database")
    POSTGRES_USER: str = Field(default="marketplace_user", description="PostgreSQL user")
    POSTGRES_PASSWORD: str = Field(..., description="PostgreSQL password")
    POSTGRES_POOL_SIZE: int = Field(default=10, description="Connection pool size")
    POSTGRES_MAX_OVERFLOW: int = Field(default=10, description="Max pool overflow")
    POSTGRES_POOL_TIMEOUT: int = Field(default=30, description="Pool timeout (seconds)")
    POSTGRES_POOL_RECYCLE: int = Field(default=3600, description="Connection recycle time")
    DATABASE_URL_OVERRIDE: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy async URL (e.g. sqlite+aiosqlite:///./local.db) used instead of POSTGRES_*",
    )
    DB_STATEMENT_TIMEOUT_MS: int = Field(
        default=5000, ge=0, description="PostgreSQL statement_timeout per session (0 disables)"
    )

    # =============================================================================
    # SEARCH
    # =============================================================================
    MANPOWER_SEARCH_LIMIT: int = Field(
        default=50, ge=1, description="Maximum manpower profiles returned per search"
    )
    FEATURED_MANPOWER_LIMIT: int = Field(
        default=3, ge=1, description="Number of featured manpower profiles"
    )

    # =============================================================================
    # API CONFIGURATION
    # =============================================================================
    API_HOST: str = Field(default="0.0.0.0", description="API server host")
    API_PORT: int = Field(default=5550, description="API server port")
    API_CORS_ORIGINS: str = Field(
        default="http://localhost:5173", description="CORS allowed origins (comma-separated)"
    )
    TRUSTED_PROXY_HOSTS: str = Field(
        default="127.0.0.1,localhost", description="Hosts trusted for X-Forwarded-* headers"
    )

    # =============================================================================
    # VALIDATORS
    # =============================================================================

    @field_validator("DATABASE_URL_OVERRIDE", mode="before")
    @classmethod
    def parse_database_url_override(cls, v):
        """Treat empty strings as unset (docker-compose passes empty strings)."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def DATABASE_URL(self) -> str:
        """Async SQLAlchemy connection URL (override wins over POSTGRES_* components)."""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    def get_cors_origins(self) -> list[str]:
        """
        Get CORS origins as a list with security validation.

        Security considerations:
        - Never returns empty list (falls back to localhost defaults)
        - Logs error if wildcard (*) is detected

        Returns:
            List of allowed origins
        """
        logger = logging.getLogger(__name__)

        origins = [origin.strip() for origin in self.API_CORS_ORIGINS.split(",") if origin.strip()]

        if not origins:
            logger.warning(
                "API_CORS_ORIGINS not set or empty, using localhost defaults. "
                "Set API_CORS_ORIGINS env var for production."
            )
            return [
                "http://localhost:5173",
                "http://localhost:3000",
                "http://127.0.0.1:5173",
            ]

        if "*" in origins:
            logger.error(
                "SECURITY WARNING: Wildcard (*) CORS origin detected in API_CORS_ORIGINS. "
                "Combined with allow_credentials=True this lets any website call the API. "
                "Specify explicit origins instead."
            )

        return origins

    def get_trusted_proxy_hosts(self) -> list[str]:
        """Get trusted proxy hosts as a list."""
        return [host.strip() for host in self.TRUSTED_PROXY_HOSTS.split(",") if host.strip()]


# Global settings instance (singleton)
# All services import and use this instance
settings = Settings()
