"""
Configuration management for the document reader.

Uses Pydantic Settings for type-safe configuration loading from environment
variables prefixed with DOC_EXTRACT_ (or a local .env file).
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Reader settings loaded from environment variables.

    Every field has a default, so an empty environment is valid.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOC_EXTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Diagnostics
    # ==========================================================================
    debug: bool = Field(
        default=False,
        description="Log internal failures (no behavioral effect)",
    )

    # ==========================================================================
    # Staging Configuration
    # ==========================================================================
    staging_dir: Path = Field(
        default=Path("temp"),
        description="Directory for staging buffers handed to path-only tools",
    )

    # ==========================================================================
    # Execution Configuration
    # ==========================================================================
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Thread pool size for batch reads (None lets the pool decide)",
    )

    legacy_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for external legacy-format tools",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.
    """
    return Settings()
