"""
Shared settings base.

Every settings module reads the same .env file and ignores unknown keys,
so one .env can carry POSTGRES_*, OPENROUTER_* and application values.

Dependencies: pydantic, pydantic_settings
System role: Root of the configuration tree
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings base with application-wide fields."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment name",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
