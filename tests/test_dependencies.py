"""
Test suite for dependency injection container.

Tests factory functions for service creation and the cached attribution
generator.

System role: Verification of DI container
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.api.deps import (
    get_attribution_generator,
    get_attribution_service,
    get_service_cache,
)
from backend.api.deps.dependencies import ServiceCache
from backend.application.services import AttributionService
from backend.configs import Settings
from backend.configs.attribution import AttributionSettings
from backend.core.attribution import SourceAttributionGenerator


@pytest.fixture
def settings() -> Settings:
    """Provide application settings with a test API key."""
    return Settings(attribution=AttributionSettings(api_key="test-key", model="test/model"))


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_attribution_generator_should_be_cached(self, settings: Settings) -> None:
        """Test the generator is built once and reused."""
        # Arrange
        cache = ServiceCache()

        with patch("backend.api.deps.dependencies.get_settings", return_value=settings):
            # Act
            first = cache.attribution_generator
            second = cache.attribution_generator

        # Assert
        assert first is second
        assert isinstance(first, SourceAttributionGenerator)
        assert first.model_used == "test/model"

    def test_clear_should_drop_cached_generator(self, settings: Settings) -> None:
        """Test clear forces a rebuild on next access."""
        cache = ServiceCache()

        with patch("backend.api.deps.dependencies.get_settings", return_value=settings):
            first = cache.attribution_generator
            cache.clear()
            second = cache.attribution_generator

        assert first is not second

    def test_get_service_cache_should_return_singleton(self) -> None:
        """Test the module-level cache is shared."""
        assert get_service_cache() is get_service_cache()


class TestGetAttributionService:
    """Test suite for get_attribution_service factory."""

    def test_get_attribution_service_should_wire_db_and_generator(self, settings: Settings) -> None:
        """Test service receives the session and generator."""
        # Arrange
        db = AsyncMock(spec=AsyncSession)
        generator = SourceAttributionGenerator(settings=settings.attribution)

        # Act
        service = get_attribution_service(db=db, generator=generator)

        # Assert
        assert isinstance(service, AttributionService)
        assert service.db is db
        assert service.generator is generator

    def test_get_attribution_generator_should_use_service_cache(self) -> None:
        """Test the dependency reads from the shared cache."""
        sentinel = object()

        with patch("backend.api.deps.dependencies.get_service_cache") as mock_cache:
            mock_cache.return_value.attribution_generator = sentinel

            assert get_attribution_generator() is sentinel


class TestDepsExports:
    """Test suite for the deps package surface."""

    def test_deps_should_export_only_wired_factories(self) -> None:
        """Test every exported dependency is one the routers or lifespan use."""
        import backend.api.deps as deps

        assert sorted(deps.__all__) == [
            "get_attribution_generator",
            "get_attribution_service",
            "get_service_cache",
        ]
