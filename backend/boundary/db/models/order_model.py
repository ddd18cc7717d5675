"""
Medication order ORM model.

Represents a medication order with its diagnoses and medication history.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Order persistence
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class OrderModel(Base, UUIDMixin, TimestampMixin):
    """
    Medication order ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        patient_id: Owning patient
        medication_name: Ordered medication
        primary_diagnosis: ICD-10 code
        additional_diagnoses: List of ICD-10 codes
        medication_history: List of prior medications
        patient: Owning PatientModel
        care_plans: Care plans generated for this order
    """

    __tablename__ = "orders"

    patient_id: Mapped[UUID] = mapped_column(
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    medication_name: Mapped[str] = mapped_column(String(255), nullable=False)
    primary_diagnosis: Mapped[str] = mapped_column(String(16), nullable=False)
    additional_diagnoses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    medication_history: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Relationships
    patient = relationship("PatientModel", back_populates="orders")
    care_plans = relationship(
        "CarePlanModel",
        back_populates="order",
        cascade="all, delete-orphan",
    )
