"""
Source attribution API endpoints.

Routes:
- POST /attribution - Attribute a care plan text against a patient record

Dependencies: backend.application.services.attribution_service, backend.models
System role: Ad-hoc attribution HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.api.deps import get_attribution_service
from backend.application.services.attribution_service import AttributionService
from backend.core.exceptions import ConfigurationError, GenerationError
from backend.models.attribution import AttributionRequest, SourceAttribution

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/attribution", tags=["attribution"])


@router.post("", response_model=SourceAttribution)
async def generate_attribution(
    request: AttributionRequest,
    attribution_service: AttributionService = Depends(get_attribution_service),
) -> SourceAttribution:
    """
    Generate source attribution for care plan text.

    Args:
        request: AttributionRequest with care plan and patient record text
        attribution_service: Injected AttributionService

    Returns:
        SourceAttribution: Attribution document

    Raises:
        HTTPException(500): Missing configuration or generation failed
    """
    try:
        return await attribution_service.generate_for_text(
            care_plan_text=request.care_plan_text,
            patient_record_text=request.patient_record_text,
        )
    except (ConfigurationError, GenerationError) as e:
        logger.error(f"Error generating source attribution: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate source attribution: {e.message}",
        )
