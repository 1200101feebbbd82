"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

from .consts import MIN_SIMILARITY_SCORE, SERVER_NAME


class Config(BaseSettings):
    """Suggestion service configuration."""

    model_config = ConfigDict(
        env_prefix="SUGGESTMCP_", case_sensitive=False, extra="ignore"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    min_score: float = Field(
        default=MIN_SIMILARITY_SCORE,
        ge=0.0,
        le=1.0,
        description="Minimum similarity for member, import and export suggestions",
    )
    include_signatures: bool = Field(
        default=True, description="Attach call signatures to suggestions"
    )
    project_root: str = Field(
        default=".",
        description="Directory that relative containing-file paths are resolved against",
    )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure logging for the entire application"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger(SERVER_NAME)
