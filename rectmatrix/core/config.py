"""
Library configuration.

Settings are read from ``RECTMATRIX_``-prefixed environment variables
(or a ``.env`` file) and cached for the lifetime of the process.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="RECTMATRIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Construction
    NEGATIVE_DIMENSIONS: Literal["clamp", "reject"] = "clamp"  # clamp -> empty matrix

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
