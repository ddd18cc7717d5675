"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
All business rules and domain-specific logic reside here.
"""

from backend.core.exceptions import (
    CarePlanAttributionException,
    ConfigurationError,
    LLMProviderError,
    TransportError,
    InvalidResponseShapeError,
    EmptyGenerationError,
    ParseFailureError,
    InvalidAttributionShapeError,
    GenerationError,
    CarePlanNotFoundError,
)

# Business logic modules
from backend.core.attribution import SourceAttributionGenerator

__all__ = [
    # Exceptions
    "CarePlanAttributionException",
    "ConfigurationError",
    "LLMProviderError",
    "TransportError",
    "InvalidResponseShapeError",
    "EmptyGenerationError",
    "ParseFailureError",
    "InvalidAttributionShapeError",
    "GenerationError",
    "CarePlanNotFoundError",
    # Business logic
    "SourceAttributionGenerator",
]
