"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.configs import get_settings
from backend.boundary.db import get_async_db
from backend.application.services import AttributionService
from backend.core.attribution import SourceAttributionGenerator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._attribution_generator = None

    @property
    def attribution_generator(self) -> SourceAttributionGenerator:
        """Get cached attribution generator."""
        if self._attribution_generator is None:
            settings = get_settings()
            self._attribution_generator = SourceAttributionGenerator(
                settings=settings.attribution,
            )
        return self._attribution_generator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._attribution_generator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_attribution_generator() -> SourceAttributionGenerator:
    """
    Get the source attribution generator.

    Returns:
        SourceAttributionGenerator: Generator built from application settings
    """
    return get_service_cache().attribution_generator


def get_attribution_service(
    db: AsyncSession = Depends(get_async_db),
    generator: SourceAttributionGenerator = Depends(get_attribution_generator),
) -> AttributionService:
    """
    Get attribution service instance.

    Args:
        db: Async database session (injected via Depends)
        generator: Attribution generator (injected via Depends)

    Returns:
        AttributionService: Attribution service instance
    """
    return AttributionService(db=db, generator=generator)
