"""
Centralized configuration management using Pydantic Settings.

This module provides type-safe configuration management with validation,
loading settings from environment variables and .env files.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


VALID_DATABASE_SCHEMES = ["sqlite", "sqlite+aiosqlite", "postgresql", "postgresql+asyncpg"]
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The connection defaults match the local development database. All
    settings can be overridden via environment variables.
    """

    # Database connection
    db_user: str = Field(
        default="development",
        description="Database role used by the connection pool"
    )
    db_password: str = Field(
        default="development",
        description="Password for db_user"
    )
    db_host: str = Field(
        default="localhost",
        description="Database server host"
    )
    db_port: int = Field(
        default=5432,
        ge=1,
        le=65535,
        description="Database server port"
    )
    db_name: str = Field(
        default="lightbnb",
        description="Database name"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; takes precedence over the db_* fields when set"
    )

    # Query defaults
    default_result_limit: int = Field(
        default=10,
        ge=1,
        description="Row cap applied to listings when the caller gives no limit"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit logs as single-line JSON"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: Optional[str]) -> Optional[str]:
        """
        Validate database URL format.

        Supports PostgreSQL (production) and SQLite (tests, local tooling).
        """
        if v is None:
            return None
        if v.strip() == "":
            raise ValueError("DATABASE_URL cannot be empty when set")

        if not any(v.startswith(scheme + "://") for scheme in VALID_DATABASE_SCHEMES):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(VALID_DATABASE_SCHEMES)}. "
                f"Got: {v[:20]}..."
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}. Got: {v}"
            )
        return level

    @property
    def sqlalchemy_database_url(self) -> str:
        """
        URL handed to the async engine.

        Plain ``postgresql://`` URLs are upgraded to the asyncpg driver so the
        pool stays non-blocking.
        """
        if self.database_url:
            if self.database_url.startswith("postgresql://"):
                return "postgresql+asyncpg://" + self.database_url[len("postgresql://"):]
            if self.database_url.startswith("sqlite://"):
                return "sqlite+aiosqlite://" + self.database_url[len("sqlite://"):]
            return self.database_url

        url = URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.sqlalchemy_database_url.startswith("sqlite")


# Global settings instance
# Import this instance throughout the application
settings = Settings()
