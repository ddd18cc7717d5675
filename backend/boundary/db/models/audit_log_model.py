"""
Audit log ORM model.

Append-only record of data-entry and generation events.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Audit trail persistence
"""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AuditLogModel(Base, UUIDMixin, TimestampMixin):
    """
    Audit log ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        event_type: Event name (e.g. "generate_attribution")
        entity_id: ID of the affected entity (optional)
        entity_type: Kind of the affected entity (optional)
        description: Free-text description (optional)
    """

    __tablename__ = "audit_logs"

    event_type: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    entity_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True, default=None)
    entity_type: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
