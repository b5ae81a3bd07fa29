"""
Configuration management using Pydantic Settings.
Loads environment variables once and provides type-safe, read-only configuration.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # PORT= and VERSION= fall back to the defaults
        env_ignore_empty=True,
        frozen=True,
    )

    # Server
    port: int = Field(default=8080, ge=0, le=65535)

    # Build label echoed in every JSON response
    version: str = "dev-local"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Constants - preserved from Node.js implementation

APP_NAME = "hcomp-app"

# Bind on all interfaces
HOST = "0.0.0.0"

# Phrase Set
PHRASES = (
    "I Love Sabich",
    "Kama Lasim Bapita?",
    "Ein al falafel",
    "And Also Tchina!",
)

# 404 body
NOT_FOUND_BODY = "Not Found\n"
