"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_attribution_generator,
    get_attribution_service,
    get_service_cache,
)

__all__ = [
    "get_attribution_generator",
    "get_attribution_service",
    "get_service_cache",
]
