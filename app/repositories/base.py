"""
Base repository implementing common CRUD operations using SQLAlchemy 2.0.

Model-specific repositories (skills, swap requests, reviews) extend this
with their own queries. Repositories only flush; committing is left to the
API layer so one request maps to one transaction.
"""

from __future__ import annotations
from typing import Generic, TypeVar, Type, Optional
from uuid import UUID
from sqlalchemy import select, delete as sql_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

logger = logging.getLogger(__name__)

# Generic type variable for the model
T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic base repository for CRUD operations.

    Type Parameters:
        T: The SQLAlchemy model type this repository manages

    Example:
        class SkillRepository(BaseRepository[Skill]):
            def __init__(self):
                super().__init__(Skill)
    """

    def __init__(self, model: Type[T]):
        self.model = model

    async def get(
        self,
        db: AsyncSession,
        id: UUID
    ) -> Optional[T]:
        """
        Retrieve a single record by ID.

        Args:
            db: Active database session
            id: UUID of the record to retrieve

        Returns:
            Model instance if found, None otherwise
        """
        try:
            stmt = select(self.model).where(self.model.id == id)
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching {self.model.__name__} by id {id}: {e}")
            raise

    async def create(
        self,
        db: AsyncSession,
        obj_in: dict
    ) -> T:
        """
        Create a new record and flush it so server defaults are populated.

        Args:
            db: Active database session
            obj_in: Dictionary of field values for the new record

        Returns:
            Created model instance

        Raises:
            IntegrityError: If constraints are violated (e.g., duplicate unique field)
        """
        try:
            db_obj = self.model(**obj_in)
            db.add(db_obj)
            await db.flush()
            await db.refresh(db_obj)
            return db_obj
        except IntegrityError as e:
            logger.warning(f"Integrity error creating {self.model.__name__}: {e}")
            await db.rollback()
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model.__name__}: {e}")
            await db.rollback()
            raise

    async def update(
        self,
        db: AsyncSession,
        db_obj: T,
        obj_in: dict
    ) -> T:
        """
        Apply the provided fields to an existing record.

        Unknown keys are ignored so partial-update payloads can be passed
        straight through.
        """
        try:
            for field, value in obj_in.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            await db.flush()
            await db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError as e:
            logger.error(f"Error updating {self.model.__name__}: {e}")
            await db.rollback()
            raise

    async def delete(
        self,
        db: AsyncSession,
        id: UUID
    ) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if a row was deleted, False if none matched
        """
        try:
            stmt = sql_delete(self.model).where(self.model.id == id)
            result = await db.execute(stmt)
            await db.flush()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.model.__name__} with id {id}: {e}")
            await db.rollback()
            raise
