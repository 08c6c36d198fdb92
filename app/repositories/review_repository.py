"""
Review repository for post-swap feedback.
"""

from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.models.review import Review
from .base import BaseRepository

logger = logging.getLogger(__name__)


class ReviewRepository(BaseRepository[Review]):

    def __init__(self):
        super().__init__(Review)

    async def get_with_reviewer(
        self,
        db: AsyncSession,
        id: UUID
    ) -> Optional[Review]:
        try:
            stmt = (
                select(Review)
                .where(Review.id == id)
                .options(selectinload(Review.reviewer))
                .execution_options(populate_existing=True)
            )
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching review {id}: {e}")
            raise

    async def get_by_request_and_reviewer(
        self,
        db: AsyncSession,
        request_id: UUID,
        reviewer_id: UUID
    ) -> Optional[Review]:
        try:
            stmt = select(Review).where(
                Review.request_id == request_id,
                Review.reviewer_id == reviewer_id,
            )
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error checking review by {reviewer_id} for request {request_id}: {e}")
            raise

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID
    ) -> list[Review]:
        """Reviews received by ``user_id``, newest first, with reviewer loaded."""
        try:
            stmt = (
                select(Review)
                .where(Review.reviewed_user_id == user_id)
                .options(selectinload(Review.reviewer))
                .order_by(desc(Review.created_at))
            )
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing reviews for user {user_id}: {e}")
            raise

    async def average_rating(
        self,
        db: AsyncSession,
        user_id: UUID
    ) -> Optional[float]:
        try:
            stmt = select(func.avg(Review.rating)).where(Review.reviewed_user_id == user_id)
            result = await db.execute(stmt)
            value = result.scalar_one_or_none()
            return round(float(value), 2) if value is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Error averaging ratings for user {user_id}: {e}")
            raise
