# ==============================================================================
# Application Configuration
# ==============================================================================
"""
Configuration management using pydantic-settings.

All configuration is loaded from environment variables prefixed with
``SESSIONTOP_``, with support for .env files via python-dotenv. Command-line
options override these values for a single run.
"""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sessiontop.core.models import DEFAULT_SESSION_THRESHOLD_SECONDS

# Load .env file before any settings are instantiated
load_dotenv()


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SESSIONTOP_",
        extra="ignore",
    )

    session_threshold_seconds: int = Field(
        default=DEFAULT_SESSION_THRESHOLD_SECONDS,
        gt=0,
        description="Largest gap in seconds between requests of one session",
    )
    top_n: int = Field(default=5, gt=0, description="Number of top users to report")
    strategy: Literal["streaming", "interval"] = Field(
        default="streaming",
        description="Session aggregation strategy (streaming, interval)",
    )
    include_seconds: bool = Field(
        default=False,
        description="Show session lengths as minutes:seconds instead of whole minutes",
    )
    log_level: str = Field(default="WARNING", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()
