"""
Database models package.

Exports:
  - ProviderModel: Referring provider
  - PatientModel: Patient demographics and allergies
  - OrderModel: Medication order with diagnoses
  - CarePlanModel: Generated care plan with source attribution
  - AuditLogModel: Audit trail entry

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.provider_model import ProviderModel
from backend.boundary.db.models.patient_model import PatientModel
from backend.boundary.db.models.order_model import OrderModel
from backend.boundary.db.models.care_plan_model import CarePlanModel
from backend.boundary.db.models.audit_log_model import AuditLogModel

__all__ = [
    "ProviderModel",
    "PatientModel",
    "OrderModel",
    "CarePlanModel",
    "AuditLogModel",
]
