"""
OpenRouter chat-completions client.

Issues one HTTP request per call with pinned model, temperature, and output
token ceiling, and surfaces transport and API-level failures as typed errors.

Dependencies: httpx, backend.core.exceptions
System role: LLM call adapter for the attribution pipeline
"""

import logging
from typing import Any

import httpx

from backend.core.exceptions import InvalidResponseShapeError, TransportError
from backend.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class OpenRouterClient:
    """Async client for the OpenRouter chat-completions endpoint.

    A fresh httpx.AsyncClient is opened for every call and closed when the
    call completes.

    Usage:
        client = OpenRouterClient(api_key="sk-...", base_url="https://openrouter.ai/api/v1",
                                  model="openai/gpt-oss-20b:free")
        content = await client.complete(messages, max_tokens=3000)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        temperature: float = 0.1,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            api_key: OpenRouter API key
            base_url: API base URL
            model: Model identifier
            temperature: Sampling temperature
            timeout: Per-call timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._temperature = temperature
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        """Chat-completions URL."""
        return f"{self._base_url}/chat/completions"

    async def complete(self, messages: list[dict[str, str]], max_tokens: int) -> str:
        """
        Send one chat-completions request and return the message content.

        Args:
            messages: System and user messages
            max_tokens: Output token ceiling for this call

        Returns:
            str: Raw model output (may be blank)

        Raises:
            TransportError: Network failure, timeout, or non-2xx status
            InvalidResponseShapeError: Body lacks choices[0].message.content
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self._model,
            "messages": messages,
            "temperature": self._temperature,
            "max_tokens": max_tokens,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"OpenRouter request timed out after {self._timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"OpenRouter request failed: {type(e).__name__}: {e}"
            ) from e

        if not response.is_success:
            logger.error(
                f"OpenRouter API error: status={response.status_code} "
                f"body={safe_log_value(response.text)}"
            )
            raise TransportError(
                f"OpenRouter API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise InvalidResponseShapeError("Invalid response from OpenRouter API: body is not JSON") from e

        return _extract_content(data)


def _extract_content(data: Any) -> str:
    """Pull choices[0].message.content out of a completion body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error(f"Invalid OpenRouter API response: {safe_log_value(data)}")
        raise InvalidResponseShapeError(
            "Invalid response from OpenRouter API: missing choices[0].message.content"
        ) from e

    # Some providers return null content when generation yields nothing
    if content is None:
        return ""
    if not isinstance(content, str):
        raise InvalidResponseShapeError(
            "Invalid response from OpenRouter API: message content is not text",
            details={"content_type": type(content).__name__},
        )
    return content
