"""
SQLAlchemy declarative base and shared column mixins.

Every care plan, order, patient, provider, and audit table derives from
Base so that create_tables registers it.

Dependencies: sqlalchemy
System role: Foundation for care plan persistence models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for care plan persistence models."""

    pass


class UUIDMixin:
    """
    UUID v4 primary key.

    Attributes:
        id: Primary key, generated on insert
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class TimestampMixin:
    """
    Row creation and modification times, stored in UTC.

    Attributes:
        created_at: Set once on insert
        updated_at: Refreshed on every update
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
