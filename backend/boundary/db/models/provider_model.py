"""
Provider ORM model.

Represents a referring provider identified by NPI.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Provider persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class ProviderModel(Base, UUIDMixin, TimestampMixin):
    """
    Provider ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Provider name
        npi: Unique 10-digit National Provider Identifier
    """

    __tablename__ = "providers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    npi: Mapped[str] = mapped_column(String(10), nullable=False, unique=True, index=True)
