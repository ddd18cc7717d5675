"""
Exception hierarchy for the care plan attribution service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CarePlanAttributionException(Exception):
    """Base exception for all attribution service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(CarePlanAttributionException):
    """Raised when required configuration (e.g. the provider API key) is missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the missing or invalid setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class LLMProviderError(CarePlanAttributionException):
    """Base exception for failures talking to the LLM provider."""

    pass


class TransportError(LLMProviderError):
    """Raised on network failure, timeout, or a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize transport error.

        Args:
            message: Error message
            status_code: HTTP status returned by the provider, if any
            body: Response body returned by the provider, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        if body:
            details["body"] = body
        self.status_code = status_code
        self.body = body
        super().__init__(message, details)


class InvalidResponseShapeError(LLMProviderError):
    """Raised when a successful response lacks choices[0].message.content."""

    pass


class EmptyGenerationError(LLMProviderError):
    """Raised when the model returns blank content."""

    pass


class ParseFailureError(CarePlanAttributionException):
    """Raised when attribution JSON cannot be extracted, repaired, or parsed."""

    pass


class InvalidAttributionShapeError(ParseFailureError):
    """Raised when parsed JSON does not project onto the attribution model."""

    pass


class GenerationError(CarePlanAttributionException):
    """Raised when the whole-document attribution attempt fails."""

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message
            cause: Underlying exception
            details: Additional context
        """
        details = details or {}
        if cause is not None:
            details["cause"] = type(cause).__name__
        self.cause = cause
        super().__init__(message, details)


class CarePlanNotFoundError(CarePlanAttributionException):
    """Raised when a care plan cannot be found."""

    def __init__(self, care_plan_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize care plan not found error.

        Args:
            care_plan_id: ID of the missing care plan
            details: Additional context
        """
        details = details or {}
        details["care_plan_id"] = care_plan_id
        super().__init__(f"Care plan not found: {care_plan_id}", details)
