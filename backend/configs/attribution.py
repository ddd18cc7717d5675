"""
Source attribution configuration settings.

Manages the OpenRouter connection and the fixed routing/token constants
used by the attribution pipeline.

Dependencies: pydantic, pydantic_settings
System role: LLM provider and pipeline configuration for source attribution
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class AttributionSettings(BaseSettings):
    """OpenRouter and attribution pipeline configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENROUTER_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="OpenRouter API key (required before any provider call)",
    )
    base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenRouter API base URL",
    )
    model: str = Field(
        default="openai/gpt-oss-20b:free",
        description="Model identifier sent to the provider and stamped on results",
    )
    temperature: float = Field(default=0.1, description="Sampling temperature")

    single_call_max_tokens: int = Field(
        default=6000,
        description="Output token ceiling for whole-document calls",
    )
    chunk_call_max_tokens: int = Field(
        default=3000,
        description="Output token ceiling for per-chunk calls",
    )
    chunking_token_threshold: int = Field(
        default=5000,
        description="Estimated input tokens above which the care plan is chunked",
    )
    max_chunk_size: int = Field(
        default=2000,
        description="Character budget per care plan chunk",
    )
    chars_per_token: float = Field(
        default=3.5,
        description="Characters per token used for input estimation",
    )

    request_timeout_seconds: float = Field(
        default=60.0,
        description="Per-call timeout for provider requests",
    )
    max_concurrent_chunks: int = Field(
        default=1,
        ge=1,
        description="Concurrent chunk calls (1 keeps the loop strictly sequential)",
    )
