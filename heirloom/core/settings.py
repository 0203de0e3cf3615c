"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

SHARES_FLAG_NAME = "inheritanceShares_v1"


class HeirloomSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Persistence
    shares_flag_name: str = Field(
        default=SHARES_FLAG_NAME,
        min_length=1,
        description="Character flag holding the versioned share override",
    )

    # Defaults
    restrict_to_eligible: bool = Field(
        default=True, description="Drop non-eligible heirs when storing shares"
    )
    max_fertility_multiplier: float = Field(default=5.0, gt=0)

    # Export
    export_dir: str = Field(default="results", description="Directory for saved previews")

    model_config = {
        "env_prefix": "HEIRLOOM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> HeirloomSettings:
    """Get cached application settings."""
    return HeirloomSettings()
