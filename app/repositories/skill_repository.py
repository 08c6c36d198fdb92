"""
Skill repository: catalog browsing and owner listings.
"""

from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy import select, func, update, or_, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.models.skill import Skill
from .base import BaseRepository

logger = logging.getLogger(__name__)


class SkillRepository(BaseRepository[Skill]):
    """
    Repository for Skill model.

    Provides methods for:
    - Filtered, paginated catalog search
    - Listings owned by one user
    - View counting
    """

    def __init__(self):
        super().__init__(Skill)

    async def get_with_owner(
        self,
        db: AsyncSession,
        id: UUID
    ) -> Optional[Skill]:
        try:
            stmt = (
                select(Skill)
                .where(Skill.id == id)
                .options(selectinload(Skill.owner))
                .execution_options(populate_existing=True)
            )
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching skill {id} with owner: {e}")
            raise

    async def search(
        self,
        db: AsyncSession,
        category: Optional[str] = None,
        search: Optional[str] = None,
        status_filter: Optional[str] = None,
        skip: int = 0,
        limit: int = 20
    ) -> tuple[list[Skill], int]:
        """
        Get a filtered page of skills, newest first.

        Args:
            db: Active database session
            category: Optional category to match exactly
            search: Optional case-insensitive substring matched against title and description
            status_filter: Optional listing status
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Tuple of (skills with owner loaded, total matching count)

        Example:
            skills, total = await repo.search(db, category="language", search="spanish")
        """
        filters = []
        if category:
            filters.append(Skill.category == category)
        if status_filter:
            filters.append(Skill.status == status_filter)
        if search:
            pattern = f"%{search.strip()}%"
            filters.append(or_(Skill.title.ilike(pattern), Skill.description.ilike(pattern)))

        try:
            query = (
                select(Skill)
                .where(*filters)
                .options(selectinload(Skill.owner))
                .order_by(desc(Skill.created_at))
                .offset(skip)
                .limit(limit)
            )
            result = await db.execute(query)
            skills = list(result.scalars().all())

            count_query = select(func.count()).select_from(Skill).where(*filters)
            count_result = await db.execute(count_query)
            total = count_result.scalar_one()

            return skills, total
        except SQLAlchemyError as e:
            logger.error(f"Error searching skills: {e}")
            raise

    async def list_for_owner(
        self,
        db: AsyncSession,
        user_id: UUID
    ) -> list[Skill]:
        try:
            stmt = (
                select(Skill)
                .where(Skill.user_id == user_id)
                .options(selectinload(Skill.owner))
                .order_by(desc(Skill.created_at))
            )
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing skills for user {user_id}: {e}")
            raise

    async def increment_views(
        self,
        db: AsyncSession,
        id: UUID
    ) -> None:
        """Increment the view counter in the database rather than in Python."""
        try:
            stmt = (
                update(Skill)
                .where(Skill.id == id)
                .values(views=Skill.views + 1)
                .execution_options(synchronize_session=False)
            )
            await db.execute(stmt)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error incrementing views for skill {id}: {e}")
            await db.rollback()
            raise
