"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.
"""

import logging
from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Request limits
    MAX_BRAND_KEYWORDS: int = 500
    MAX_RANKED_KEYWORDS: int = 1000
    MAX_POSITION: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and services embedding the engine.

    Args:
        level: Log level name. Defaults to Settings.LOG_LEVEL.
    """
    level_name = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
