"""
Generic async CRUD helpers.

Model-specific CRUD classes (care plans, audit log) inherit the insert,
lookup, and partial update primitives defined here.

Dependencies: sqlalchemy
System role: Shared persistence primitives
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic CRUD bound to one ORM model.

    Methods flush but never commit; the caller owns the transaction.

    Attributes:
        model: ORM model class
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a row and return it with server defaults loaded.

        Args:
            session: Async database session
            **kwargs: Column values

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Fetch one row by primary key, None if absent."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def update_by_id(self, session: AsyncSession, id: UUID, **kwargs) -> ModelT | None:
        """
        Set the given columns on one row.

        Columns not named in kwargs are left untouched.

        Args:
            session: Async database session
            id: Primary key
            **kwargs: Columns to set

        Returns:
            Updated model instance, None if no row matched
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
