"""
Care plan database settings.

PostgreSQL connection parameters for the async SQLAlchemy engine that
stores care plans, patient rows, attribution documents, and audit events.

Dependencies: pydantic, pydantic_settings
System role: Persistence configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL configuration read from POSTGRES_* variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost")
    port: int = Field(default=5432)
    user: str = Field(default="postgres")
    password: str = Field(default="postgres")
    db: str = Field(default="careplans", description="Database name")
    ssl: bool = Field(default=False, description="Require TLS to the database")

    pool_size: int = Field(default=5, description="Engine pool size")
    max_overflow: int = Field(default=10, description="Connections allowed beyond pool_size")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = Field(default=False, description="Log emitted SQL")

    @property
    def async_database_url(self) -> str:
        """
        asyncpg connection URL.

        Returns:
            str: postgresql+asyncpg URL, with ssl=require when ssl is enabled
        """
        url = (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}"
        )
        return f"{url}?ssl=require" if self.ssl else url
