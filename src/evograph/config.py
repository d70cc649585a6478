"""Configuration settings for evograph."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVOGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Static desktop layout
    node_width: int = Field(default=180, ge=1, description="Logical node width")
    node_height: int = Field(default=220, ge=1, description="Logical node height")
    node_separation: float = Field(default=150, ge=0)
    rank_separation: float = Field(default=100, ge=0)

    # Edge labels
    merge_location_conditions: bool = Field(
        default=False,
        description="Build edge labels from all location records instead of the first one",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["console", "json"] = Field(default="console")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
