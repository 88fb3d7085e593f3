"""
Configuration management for the contact form service.

This module centralizes environment-driven configuration using Pydantic's
`BaseSettings`. The API, the database layer and the CLI all consume the shared
`settings` instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    # General application settings
    API_TITLE: str = "Contact Form API"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production)$")
    LOG_LEVEL: str = "INFO"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: PositiveInt = 3000
    ALLOWED_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # Database connection
    DB_HOST: str = "localhost"
    DB_PORT: PositiveInt = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "contact_form"
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False
    CONTACT_TABLE: str = "contactForm"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def _split_origins(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL, built from the DB_* parts unless DATABASE_URL is set."""

        if self.DATABASE_URL:
            return self.DATABASE_URL
        user = quote_plus(self.DB_USER)
        password = quote_plus(self.DB_PASSWORD)
        return f"mysql+aiomysql://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


# Singleton-style settings instance for modules that prefer direct access.
settings = get_settings()
