"""
Patient ORM model.

Represents a patient whose record text feeds care plan attribution.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Patient persistence
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class PatientModel(Base, UUIDMixin, TimestampMixin):
    """
    Patient ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        first_name: Patient first name
        last_name: Patient last name
        mrn: Unique 6-digit medical record number
        provider_id: Referring provider (optional)
        date_of_birth: Date of birth as entered (optional)
        sex: Sex (optional)
        weight_kg: Weight in kilograms (optional)
        allergies: Free-text allergies (optional)
        orders: Medication orders for this patient
    """

    __tablename__ = "patients"

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mrn: Mapped[str] = mapped_column(String(6), nullable=False, unique=True, index=True)

    provider_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("providers.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )
    date_of_birth: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    sex: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    weight_kg: Mapped[float | None] = mapped_column(Numeric(6, 2), nullable=True, default=None)
    allergies: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)

    # Relationships
    orders = relationship(
        "OrderModel",
        back_populates="patient",
        cascade="all, delete-orphan",
    )
