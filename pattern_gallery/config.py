"""Gallery Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Settings affect diagnostics only; demo narration on stdout never changes

Design Decisions:
    - Defaults for every field: demos run with no environment at all
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Gallery settings from PATTERN_GALLERY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_GALLERY_", env_file=".env",
        case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
