"""
Audit log CRUD operations.

Appends audit events. Audit writes never fail the operation being audited.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Audit trail persistence operations
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.audit_log_model import AuditLogModel

logger = logging.getLogger(__name__)


class AuditLogCRUD(BaseCRUD[AuditLogModel]):
    """CRUD operations for AuditLogModel."""

    def __init__(self) -> None:
        """Initialize AuditLogCRUD with AuditLogModel."""
        super().__init__(AuditLogModel)

    async def log_event(
        self,
        session: AsyncSession,
        event_type: str,
        entity_id: UUID | None = None,
        entity_type: str | None = None,
        description: str | None = None,
    ) -> AuditLogModel | None:
        """
        Record an audit event.

        Args:
            session: Async database session
            event_type: Event name
            entity_id: Affected entity ID
            entity_type: Affected entity kind
            description: Optional description

        Returns:
            Created AuditLogModel, None if the write failed
        """
        try:
            return await self.create(
                session,
                event_type=event_type,
                entity_id=entity_id,
                entity_type=entity_type,
                description=description,
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to log audit event {event_type}: {e}")
            return None


audit_log_crud = AuditLogCRUD()
