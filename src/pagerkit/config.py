"""Configuration settings for pagerkit."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGERKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Paging defaults
    default_items_per_page: int = Field(default=10, ge=1)

    # Elided pager defaults
    inner_window: int = Field(default=2, ge=0, description="Pages shown around the current page")
    outer_window: int = Field(default=1, ge=0, description="Pages shown at each edge")
    gap_marker: str = Field(default="…", description="Placeholder for elided pages")

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING"
    )
    log_format: Literal["console", "json"] = Field(default="console")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
