"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import care_plan_crud, audit_log_crud

    # Use singleton instances
    care_plan = await care_plan_crud.get_with_patient_record(db, care_plan_id)

    # Or instantiate classes directly for custom behavior
    from backend.boundary.db.CRUD import CarePlanCRUD
    custom_crud = CarePlanCRUD()
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.care_plan_crud import CarePlanCRUD, care_plan_crud
from backend.boundary.db.CRUD.audit_log_crud import AuditLogCRUD, audit_log_crud

__all__ = [
    "BaseCRUD",
    "CarePlanCRUD",
    "care_plan_crud",
    "AuditLogCRUD",
    "audit_log_crud",
]
