"""
Source attribution orchestrator.

Routes a care plan to a single whole-document call or to chunked calls,
drives prompt building, the provider call, and response recovery, and
assembles the final SourceAttribution document.

Dependencies: httpx, backend.configs, backend.core.attribution, backend.models
System role: Entry point of the attribution pipeline
"""

import asyncio
import logging
from datetime import datetime, timezone

import httpx

from backend.configs.attribution import AttributionSettings
from backend.core.attribution.attribution_prompt import (
    ATTRIBUTION_PROMPT_NAME,
    ATTRIBUTION_PROMPT_VERSION,
    ATTRIBUTION_SYSTEM_PROMPT,
    build_attribution_messages,
)
from backend.core.attribution.chunker import chunk_care_plan
from backend.core.attribution.llm_client import OpenRouterClient
from backend.core.attribution.response_parser import parse_attribution_response
from backend.core.attribution.token_estimator import estimate_tokens
from backend.core.exceptions import (
    ConfigurationError,
    GenerationError,
    LLMProviderError,
    ParseFailureError,
)
from backend.models.attribution import (
    AttributionSection,
    AttributionStatement,
    AttributionType,
    SourceAttribution,
)

logger = logging.getLogger(__name__)

FALLBACK_SECTION_NAME = "Attribution Analysis Unavailable"
FALLBACK_STATEMENT = "Source attribution could not be generated due to technical issues"
FALLBACK_SOURCE = "LLM response was incomplete or malformed - manual review recommended"


def build_fallback_attribution(model_used: str) -> SourceAttribution:
    """
    Build the placeholder document used when the model output is unusable.

    Args:
        model_used: Model identifier to stamp on the document

    Returns:
        SourceAttribution: One section with one standard_practice statement
    """
    return SourceAttribution(
        sections=[
            AttributionSection(
                section_name=FALLBACK_SECTION_NAME,
                statements=[
                    AttributionStatement(
                        statement_text=FALLBACK_STATEMENT,
                        sources=[FALLBACK_SOURCE],
                        attribution_type=AttributionType.STANDARD_PRACTICE,
                    )
                ],
            )
        ],
        generated_at=datetime.now(timezone.utc),
        model_used=model_used,
    )


class SourceAttributionGenerator:
    """Generate source attribution for a care plan.

    Inputs whose estimated size stays within the chunking threshold are
    attributed in one call; provider failures on that path raise
    GenerationError and unparseable output yields the fallback document.
    Larger inputs are chunked, and each failed chunk is skipped so the
    result holds whatever the remaining chunks produced.

    Usage:
        generator = SourceAttributionGenerator(settings=get_settings().attribution)
        attribution = await generator.generate(care_plan_text, patient_record_text)
    """

    def __init__(
        self,
        settings: AttributionSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            settings: Attribution settings (API key, model, limits)
            transport: Optional httpx transport passed to the provider client
        """
        self._settings = settings
        self._transport = transport

    @property
    def model_used(self) -> str:
        """Model identifier stamped on generated documents."""
        return self._settings.model

    def _create_client(self) -> OpenRouterClient:
        """Create the provider client, failing fast without an API key."""
        if not self._settings.api_key:
            raise ConfigurationError(
                "OPENROUTER_API_KEY environment variable is not set",
                setting="OPENROUTER_API_KEY",
            )
        return OpenRouterClient(
            api_key=self._settings.api_key,
            base_url=self._settings.base_url,
            model=self._settings.model,
            temperature=self._settings.temperature,
            timeout=self._settings.request_timeout_seconds,
            transport=self._transport,
        )

    def estimate_input_tokens(self, care_plan_text: str, patient_record_text: str) -> int:
        """Estimated input tokens for a whole-document call."""
        ratio = self._settings.chars_per_token
        return (
            estimate_tokens(ATTRIBUTION_SYSTEM_PROMPT, ratio)
            + estimate_tokens(care_plan_text, ratio)
            + estimate_tokens(patient_record_text, ratio)
        )

    async def generate(
        self,
        care_plan_text: str,
        patient_record_text: str,
    ) -> SourceAttribution:
        """
        Generate source attribution for a care plan.

        Args:
            care_plan_text: Generated care plan text
            patient_record_text: Patient record text blob

        Returns:
            SourceAttribution: Attribution document (possibly the fallback
                document, or an empty/partial one on the chunked path)

        Raises:
            ConfigurationError: API key not configured (before any network call)
            GenerationError: Whole-document provider call failed
        """
        client = self._create_client()

        total_tokens = self.estimate_input_tokens(care_plan_text, patient_record_text)
        logger.info(
            f"Attribution token estimate: prompt={ATTRIBUTION_PROMPT_NAME}"
            f"@v{ATTRIBUTION_PROMPT_VERSION} total={total_tokens} "
            f"threshold={self._settings.chunking_token_threshold} "
            f"care_plan_chars={len(care_plan_text)} "
            f"patient_record_chars={len(patient_record_text)}"
        )

        if total_tokens > self._settings.chunking_token_threshold:
            logger.info(f"Large input detected ({total_tokens} tokens), using chunking approach")
            sections = await self._generate_chunked(client, care_plan_text, patient_record_text)
            return self._build_document(sections)

        return await self._generate_single(client, care_plan_text, patient_record_text)

    async def _generate_single(
        self,
        client: OpenRouterClient,
        care_plan_text: str,
        patient_record_text: str,
    ) -> SourceAttribution:
        """Attribute the whole care plan in one call."""
        messages = build_attribution_messages(care_plan_text, patient_record_text)

        try:
            content = await client.complete(
                messages,
                max_tokens=self._settings.single_call_max_tokens,
            )
            sections = parse_attribution_response(content)
        except ParseFailureError as e:
            logger.error(f"Error parsing attribution JSON, using fallback document: {e}")
            return build_fallback_attribution(self.model_used)
        except LLMProviderError as e:
            logger.error(f"Attribution call failed: {type(e).__name__}: {e}")
            raise GenerationError(
                f"Failed to generate source attribution: {e.message}",
                cause=e,
            ) from e

        logger.info(f"Generated source attribution with {len(sections)} sections")
        return self._build_document(sections)

    async def _generate_chunked(
        self,
        client: OpenRouterClient,
        care_plan_text: str,
        patient_record_text: str,
    ) -> list[AttributionSection]:
        """Attribute the care plan chunk by chunk, skipping failed chunks."""
        chunks = chunk_care_plan(care_plan_text, self._settings.max_chunk_size)
        logger.info(f"Processing {len(chunks)} chunks for large care plan")

        semaphore = asyncio.Semaphore(self._settings.max_concurrent_chunks)

        async def run(index: int, chunk: str) -> list[AttributionSection]:
            async with semaphore:
                return await self._attribute_chunk(
                    client, index, len(chunks), chunk, patient_record_text
                )

        # gather keeps results in chunk order regardless of completion order
        results = await asyncio.gather(
            *(run(index, chunk) for index, chunk in enumerate(chunks))
        )

        sections = [section for chunk_sections in results for section in chunk_sections]
        logger.info(
            f"Chunked attribution complete: {len(sections)} sections "
            f"from {sum(1 for r in results if r)}/{len(chunks)} chunks"
        )
        return sections

    async def _attribute_chunk(
        self,
        client: OpenRouterClient,
        index: int,
        total: int,
        chunk: str,
        patient_record_text: str,
    ) -> list[AttributionSection]:
        """Attribute one chunk; failures contribute no sections."""
        logger.info(
            f"Processing chunk {index + 1}/{total} ({len(chunk)} chars, "
            f"~{self.estimate_input_tokens(chunk, patient_record_text)} tokens)"
        )
        messages = build_attribution_messages(chunk, patient_record_text)

        try:
            content = await client.complete(
                messages,
                max_tokens=self._settings.chunk_call_max_tokens,
            )
            return parse_attribution_response(content)
        except (LLMProviderError, ParseFailureError) as e:
            logger.error(f"Skipping chunk {index + 1}/{total}: {type(e).__name__}: {e}")
            return []
        except Exception as e:
            # A single chunk must never fail the whole attribution run
            logger.exception(f"Unexpected error on chunk {index + 1}/{total}, skipping: {e}")
            return []

    def _build_document(self, sections: list[AttributionSection]) -> SourceAttribution:
        """Wrap sections with completion time and model."""
        return SourceAttribution(
            sections=sections,
            generated_at=datetime.now(timezone.utc),
            model_used=self.model_used,
        )
