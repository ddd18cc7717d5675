"""
Care plan source attribution pipeline.

Maps every statement of a generated care plan to its supporting evidence
via an LLM, with chunking for oversized inputs, tolerant JSON recovery,
and a guaranteed-valid fallback document.

Dependencies: httpx, langchain_core, pydantic
System role: Source attribution core
"""

from .attribution_prompt import (
    ATTRIBUTION_SYSTEM_PROMPT,
    build_attribution_messages,
    build_attribution_prompt,
)
from .chunker import chunk_care_plan
from .llm_client import OpenRouterClient
from .orchestrator import SourceAttributionGenerator, build_fallback_attribution
from .response_parser import parse_attribution_response, repair_truncated_json
from .token_estimator import estimate_tokens

__all__ = [
    "ATTRIBUTION_SYSTEM_PROMPT",
    "OpenRouterClient",
    "SourceAttributionGenerator",
    "build_attribution_messages",
    "build_attribution_prompt",
    "build_fallback_attribution",
    "chunk_care_plan",
    "estimate_tokens",
    "parse_attribution_response",
    "repair_truncated_json",
]
