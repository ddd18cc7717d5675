"""
Care plan ORM model.

Represents a generated pharmacist care plan and its source attribution.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Care plan and attribution persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CarePlanModel(Base, UUIDMixin, TimestampMixin):
    """
    Care plan ORM model.

    The plan text is written once by the drafting step. Attribution is a
    secondary enrichment stored alongside it and may be absent.

    Attributes:
        id: UUID primary key (auto-generated)
        order_id: Order the plan was generated for
        plan_text: Generated care plan text
        generated_by: Origin of the plan text (e.g. "LLM")
        version: Plan version number
        is_final: Whether the plan is the final version
        attribution_data: SourceAttribution document (wire-name JSON), nullable
        attribution_generated_at: When attribution_data was stored, nullable
        order: Owning OrderModel
    """

    __tablename__ = "care_plans"

    order_id: Mapped[UUID] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    plan_text: Mapped[str] = mapped_column(Text, nullable=False)
    generated_by: Mapped[str] = mapped_column(String(64), nullable=False, default="LLM")
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_final: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    attribution_data: Mapped[dict | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
        doc="Source attribution document",
    )
    attribution_generated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    # Relationships
    order = relationship("OrderModel", back_populates="care_plans")
