"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every field can be overridden with a GPXROUTE_* environment variable
or a .env file in the working directory.
"""

import logging
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from gpxroute.shared.constants import DEFAULT_PACE_MIN_PER_KM


class Settings(BaseSettings):
    """Converter settings with validation."""

    # === Core ===
    log_level: str = Field(default="WARNING", description="Logging level")

    # === Output ===
    output_dir: Path = Field(
        default=Path("."),
        description="Directory the JSON documents are written to"
    )
    json_indent: int = Field(default=2, ge=0, description="JSON indentation")

    # === Estimation ===
    pace_min_per_km: float = Field(
        default=DEFAULT_PACE_MIN_PER_KM,
        gt=0,
        description="Pace used for the estimated duration"
    )

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Accept standard level names only, normalized to upper case."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="GPXROUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
