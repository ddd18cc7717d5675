"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ProviderModel, PatientModel, OrderModel, CarePlanModel, AuditLogModel: Domain entities
  - care_plan_crud, audit_log_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter for the care plan store the attribution
pipeline reads from and writes to.
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    AuditLogModel,
    CarePlanModel,
    OrderModel,
    PatientModel,
    ProviderModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    CarePlanCRUD,
    AuditLogCRUD,
    care_plan_crud,
    audit_log_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ProviderModel",
    "PatientModel",
    "OrderModel",
    "CarePlanModel",
    "AuditLogModel",
    # CRUD classes
    "BaseCRUD",
    "CarePlanCRUD",
    "AuditLogCRUD",
    # CRUD singletons
    "care_plan_crud",
    "audit_log_crud",
]
