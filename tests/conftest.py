"""
Shared test fixtures and configuration for entire test suite.

Provides: attribution settings, OpenRouter response factories, mock transports,
database session mocks, sample attribution payloads
Dependencies: pytest, httpx, sqlalchemy
System role: Test infrastructure and fixture management
"""

import json
from typing import Callable
from unittest.mock import AsyncMock

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.configs.attribution import AttributionSettings


@pytest.fixture
def attribution_settings() -> AttributionSettings:
    """Provide attribution settings with a test API key and default limits."""
    return AttributionSettings(api_key="test-key")


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_attribution_json() -> str:
    """Provide a well-formed attribution payload as the model would emit it."""
    return json.dumps({
        "sections": [
            {
                "section": "Problem List / DTPs",
                "statements": [
                    {
                        "statement": "Risk of hyperkalemia due to ACE inhibitor and spironolactone",
                        "sources": [
                            "Patient Record: Lisinopril 40mg daily, Spironolactone 50mg daily",
                            "Clinical Reasoning: both agents raise serum potassium",
                        ],
                        "attribution_type": "mixed",
                    }
                ],
            },
            {
                "section": "SMART Goals",
                "statements": [
                    {
                        "statement": "Maintain serum potassium < 5.0 mEq/L",
                        "sources": ["Standard Practice: ACC/AHA heart failure guideline"],
                        "attribution_type": "standard_practice",
                    }
                ],
            },
        ]
    })


@pytest.fixture
def completion_body() -> Callable[[str | None], dict]:
    """Provide a factory for chat-completions success bodies."""

    def _build(content: str | None) -> dict:
        return {
            "id": "gen-test",
            "model": "openai/gpt-oss-20b:free",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
        }

    return _build


@pytest.fixture
def recording_transport() -> Callable:
    """
    Provide a factory for httpx.MockTransport that records requests.

    The handler receives the decoded JSON payload and returns an httpx.Response.
    The returned transport exposes the recorded payloads as `.requests`.
    """

    def _build(handler: Callable[[dict], httpx.Response]) -> httpx.MockTransport:
        recorded: list[dict] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            payload = json.loads(request.content)
            recorded.append(payload)
            return handler(payload)

        transport = httpx.MockTransport(_handle)
        transport.requests = recorded
        return transport

    return _build
