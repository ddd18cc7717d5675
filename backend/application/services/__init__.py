"""Service orchestrators."""

from .attribution_service import AttributionService
