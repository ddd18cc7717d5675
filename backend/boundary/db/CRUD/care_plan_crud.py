"""
Care plan CRUD operations.

Provides care plan queries with eager loading of the order and patient
needed to build the patient record, and attribution persistence.

Dependencies: sqlalchemy, backend.boundary.db.models, backend.models.attribution
System role: Care plan and attribution persistence operations
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.care_plan_model import CarePlanModel
from backend.boundary.db.models.order_model import OrderModel
from backend.models.attribution import SourceAttribution


class CarePlanCRUD(BaseCRUD[CarePlanModel]):
    """
    CRUD operations for CarePlanModel.

    Extends BaseCRUD with eager loading of order and patient and with
    storage of source attribution documents.
    """

    def __init__(self) -> None:
        """Initialize CarePlanCRUD with CarePlanModel."""
        super().__init__(CarePlanModel)

    async def get_with_patient_record(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> CarePlanModel | None:
        """
        Retrieve care plan with its order and patient eagerly loaded.

        Args:
            session: Async database session
            id: Care plan UUID

        Returns:
            CarePlanModel with order.patient loaded, None if not found
        """
        stmt = (
            select(CarePlanModel)
            .where(CarePlanModel.id == id)
            .options(
                selectinload(CarePlanModel.order).selectinload(OrderModel.patient)
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_attribution(
        self,
        session: AsyncSession,
        id: UUID,
        attribution: SourceAttribution,
    ) -> CarePlanModel | None:
        """
        Store an attribution document on a care plan.

        Args:
            session: Async database session
            id: Care plan UUID
            attribution: Attribution document to store

        Returns:
            Updated CarePlanModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            attribution_data=attribution.model_dump(mode="json", by_alias=True),
            attribution_generated_at=datetime.now(timezone.utc),
        )


care_plan_crud = CarePlanCRUD()
