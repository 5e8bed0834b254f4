"""
Configuration management for TalentMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from talentmatch.utils.constants import (
    APP_NAME,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MAX_DISTANCE_MILES,
    DEFAULT_SCORING_WEIGHTS,
)


class MatchingSettings(BaseSettings):
    """Matching pipeline configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    fuzzy_threshold: float = Field(default=DEFAULT_FUZZY_THRESHOLD, ge=0, le=1)
    default_max_distance: float = Field(default=DEFAULT_MAX_DISTANCE_MILES, ge=0)

    # Score weights
    skills_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["skills_match"], ge=0, le=1)
    education_weight: float = Field(default=DEFAULT_SCORING_WEIGHTS["education_match"], ge=0, le=1)

    # Cutoff applied to ranked results, in percent. Callers may override per run.
    min_percentage: float = Field(default=0.0, ge=0, le=100)

    # Candidates are evaluated on a thread pool when greater than 1
    max_workers: int = Field(default=1, ge=1)

    @field_validator("education_weight")
    @classmethod
    def validate_weight_total(cls, v: float, info) -> float:
        """Skill and education weights must not exceed 1 together."""
        skills = info.data.get("skills_weight")
        if skills is not None and skills + v > 1.0 + 1e-9:
            raise ValueError("skills_weight + education_weight must not exceed 1.0")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    # Relative to the working directory, not the install location
    file_path: Path = Path("logs") / "talentmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = APP_NAME
    version: str = "0.1.0"
    description: str = "Candidate-to-job matching core"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
