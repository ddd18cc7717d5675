"""
Care plan attribution API endpoints.

Routes:
- POST /care-plans/{id}/attribution - Generate and store attribution
- GET /care-plans/{id}/attribution - Get stored attribution

Dependencies: backend.application.services.attribution_service, backend.models
System role: Care plan attribution HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from backend.api.deps import get_attribution_service
from backend.application.services.attribution_service import AttributionService
from backend.core.exceptions import (
    CarePlanNotFoundError,
    ConfigurationError,
    GenerationError,
)
from backend.models.attribution import CarePlanAttributionResponse, SourceAttribution

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/care-plans", tags=["care-plans"])


@router.post("/{care_plan_id}/attribution", response_model=CarePlanAttributionResponse)
async def generate_care_plan_attribution(
    care_plan_id: UUID,
    attribution_service: AttributionService = Depends(get_attribution_service),
) -> CarePlanAttributionResponse:
    """
    Generate and store source attribution for a care plan.

    Args:
        care_plan_id: Care plan UUID
        attribution_service: Injected AttributionService

    Returns:
        CarePlanAttributionResponse: Stored attribution document

    Raises:
        HTTPException(404): Care plan not found
        HTTPException(500): Missing configuration or generation failed
    """
    try:
        attribution = await attribution_service.generate_for_care_plan(care_plan_id)
    except CarePlanNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (ConfigurationError, GenerationError) as e:
        logger.error(f"Error generating source attribution for {care_plan_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate source attribution: {e.message}",
        )

    return CarePlanAttributionResponse(
        message="Source attribution generated successfully",
        care_plan_id=care_plan_id,
        attribution_data=attribution,
    )


@router.get("/{care_plan_id}/attribution", response_model=SourceAttribution)
async def get_care_plan_attribution(
    care_plan_id: UUID,
    attribution_service: AttributionService = Depends(get_attribution_service),
) -> SourceAttribution:
    """
    Get the stored source attribution for a care plan.

    Args:
        care_plan_id: Care plan UUID
        attribution_service: Injected AttributionService

    Returns:
        SourceAttribution: Stored attribution document

    Raises:
        HTTPException(404): Care plan not found or not yet attributed
    """
    try:
        attribution = await attribution_service.get_attribution(care_plan_id)
    except CarePlanNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    if attribution is None:
        raise HTTPException(
            status_code=404,
            detail=f"No attribution stored for care plan {care_plan_id}",
        )
    return attribution
