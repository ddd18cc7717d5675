"""
Attribution service orchestrator.

Coordinates source attribution for ad-hoc text and for stored care plans:
loads the care plan and patient rows, runs the attribution pipeline, and
stores the resulting document.

Dependencies: backend.core.attribution, backend.boundary.db.CRUD, backend.models
System role: Attribution use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.patient_record import build_patient_record_text
from backend.boundary.db.CRUD.audit_log_crud import audit_log_crud
from backend.boundary.db.CRUD.care_plan_crud import care_plan_crud
from backend.core.attribution import SourceAttributionGenerator
from backend.core.exceptions import CarePlanNotFoundError
from backend.models.attribution import SourceAttribution

logger = logging.getLogger(__name__)


class AttributionService:
    """Attribution service orchestrator."""

    def __init__(self, db: AsyncSession, generator: SourceAttributionGenerator) -> None:
        """
        Initialize attribution service.

        Args:
            db: Async SQLAlchemy session
            generator: Source attribution pipeline
        """
        self.db = db
        self.generator = generator

    async def generate_for_text(
        self,
        care_plan_text: str,
        patient_record_text: str,
    ) -> SourceAttribution:
        """
        Generate attribution for care plan text without persisting it.

        Args:
            care_plan_text: Care plan text
            patient_record_text: Patient record text

        Returns:
            SourceAttribution: Attribution document

        Raises:
            ConfigurationError: Provider API key missing
            GenerationError: Whole-document generation failed
        """
        return await self.generator.generate(care_plan_text, patient_record_text)

    async def generate_for_care_plan(self, care_plan_id: UUID) -> SourceAttribution:
        """
        Generate and store attribution for a stored care plan.

        The care plan text is never modified; a failed generation leaves the
        care plan exactly as it was.

        Args:
            care_plan_id: Care plan UUID

        Returns:
            SourceAttribution: Stored attribution document

        Raises:
            CarePlanNotFoundError: Care plan does not exist
            ConfigurationError: Provider API key missing
            GenerationError: Whole-document generation failed
        """
        care_plan = await care_plan_crud.get_with_patient_record(self.db, care_plan_id)
        if not care_plan:
            raise CarePlanNotFoundError(str(care_plan_id))

        patient_record_text = build_patient_record_text(care_plan)
        logger.info(f"Generating source attribution for care plan {care_plan_id}")

        attribution = await self.generator.generate(care_plan.plan_text, patient_record_text)

        await care_plan_crud.update_attribution(self.db, care_plan_id, attribution)
        await audit_log_crud.log_event(
            self.db,
            event_type="generate_attribution",
            entity_id=care_plan_id,
            entity_type="care_plan",
            description=f"Source attribution generated ({len(attribution.sections)} sections)",
        )
        await self.db.commit()

        logger.info(f"Stored attribution for care plan {care_plan_id}")
        return attribution

    async def get_attribution(self, care_plan_id: UUID) -> SourceAttribution | None:
        """
        Get the stored attribution for a care plan.

        Args:
            care_plan_id: Care plan UUID

        Returns:
            SourceAttribution if one has been stored, None otherwise

        Raises:
            CarePlanNotFoundError: Care plan does not exist
        """
        care_plan = await care_plan_crud.get_by_id(self.db, care_plan_id)
        if not care_plan:
            raise CarePlanNotFoundError(str(care_plan_id))

        if care_plan.attribution_data is None:
            return None
        return SourceAttribution.model_validate(care_plan.attribution_data)
