"""
Application settings root.

Nests the database and attribution settings under one object so the API
layer reads everything from a single cached get_settings() call.

Dependencies: pydantic_settings, backend.configs
System role: Configuration entry point
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.attribution import AttributionSettings
from backend.configs.base import BaseSettings
from backend.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Application settings: log level plus database and attribution groups."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    attribution: AttributionSettings = Field(default_factory=AttributionSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process.

    Environment and .env values are read on first call; call
    get_settings.cache_clear() to reload them.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()
