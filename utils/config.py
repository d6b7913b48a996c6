"""
Configuration Utility - Environment Variables Management

Centralized configuration loading from .env files using pydantic-settings.
Type-safe access to all environment variables with validation.

Usage:
    from utils.config import settings

    api_base = settings.USERS_API_BASE
    reports_dir = settings.REPORTS_DIR
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    USERS_API_BASE: str = Field(default="https://gorest.co.in/public/v2/users")
    USERS_API_TOKEN: Optional[str] = Field(default=None)
    API_TIMEOUT: float = Field(default=30)

    # Pagination safety cap
    EXTRACT_MAX_PAGES: int = Field(default=1000)

    # Report output
    REPORTS_DIR: str = Field(default=".")
    ACTIVE_TEST_USERS_CSV: str = Field(default="active_test_users.csv")
    EMAIL_DOMAIN_COUNTS_CSV: str = Field(default="email_domain_counts.csv")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="text")

    # Application Metadata
    APP_NAME: str = Field(default="users-report")
    APP_VERSION: str = Field(default="0.1.0")

    @validator("API_TIMEOUT", "EXTRACT_MAX_PAGES")
    def validate_positive(cls, v):
        """Timeouts and page caps must be strictly positive."""
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @validator("USERS_API_BASE")
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
