"""
Centralized configuration management using Pydantic Settings.

This module provides type-safe configuration management with validation,
loading settings from environment variables and .env files.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Credentials embedded in DATABASE_URL belong in a .env file (gitignored).
    """

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/dolphin.db",
        description="Database connection URL (SQLite or PostgreSQL, async driver)"
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements (debug only)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_json: bool = Field(
        default=True,
        description="Emit structured JSON log lines instead of plain text"
    )

    # Pagination Configuration
    page_query_param: str = Field(
        default="page",
        min_length=1,
        description="Query parameter name used in next/previous page links"
    )
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used when callers do not supply one"
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """
        Validate database URL format.

        Ensures URL has a supported scheme and is not empty.
        """
        if not v or v.strip() == "":
            raise ValueError("DATABASE_URL is required and cannot be empty")

        valid_schemes = ["sqlite", "sqlite+aiosqlite", "postgresql", "postgresql+asyncpg"]
        if not any(v.startswith(scheme + "://") for scheme in valid_schemes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(valid_schemes)}. "
                f"Got: {v[:20]}..."
            )

        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize LOG_LEVEL and reject unknown level names."""
        level = v.strip().upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(
                f"LOG_LEVEL must be a standard logging level name. Got: {v}"
            )
        return level


# Global settings instance
# Import this instance throughout the library
settings = Settings()
