"""
Review service.

A review can only be written about a swap that reached ``completed``, by one
of its two parties, about the other party, once per swap.
"""

from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.core.exceptions import ConflictError, ForbiddenError, InvalidStateError, NotFoundError
from app.models.review import Review
from app.models.swap_request import SwapRequestStatus
from app.repositories.review_repository import ReviewRepository
from app.repositories.swap_request_repository import SwapRequestRepository
from app.schemas.review import ReviewCreate

logger = structlog.get_logger(__name__)


class ReviewService:

    def __init__(
        self,
        review_repo: Optional[ReviewRepository] = None,
        swap_request_repo: Optional[SwapRequestRepository] = None
    ):
        self.review_repo = review_repo or ReviewRepository()
        self.swap_request_repo = swap_request_repo or SwapRequestRepository()

    async def list_reviews(self, db: AsyncSession, user_id: UUID) -> tuple[list[Review], Optional[float]]:
        """Reviews received by a user and their average rating (None if unrated)."""
        reviews = await self.review_repo.list_for_user(db, user_id)
        average = await self.review_repo.average_rating(db, user_id) if reviews else None
        return reviews, average

    async def create_review(self, db: AsyncSession, caller_id: UUID, data: ReviewCreate) -> Review:
        """
        Raises:
            NotFoundError: swap request does not exist
            ForbiddenError: caller was not part of the swap
            InvalidStateError: swap is not completed
            ConflictError: caller already reviewed this swap
        """
        swap_request = await self.swap_request_repo.get(db, data.request_id)
        if swap_request is None:
            raise NotFoundError("Request not found")

        if not swap_request.is_party(caller_id):
            raise ForbiddenError("Only participants of a swap can review it")

        if swap_request.status != SwapRequestStatus.COMPLETED.value:
            raise InvalidStateError("Reviews can only be left for completed swaps")

        existing = await self.review_repo.get_by_request_and_reviewer(db, data.request_id, caller_id)
        if existing is not None:
            raise ConflictError("You have already reviewed this swap")

        review = await self.review_repo.create(
            db,
            {
                "request_id": data.request_id,
                "reviewer_id": caller_id,
                "reviewed_user_id": swap_request.other_party(caller_id),
                "rating": data.rating,
                "comment": data.comment,
            },
        )
        logger.info(
            "review_created",
            review_id=str(review.id),
            swap_request_id=str(data.request_id),
            rating=data.rating,
        )
        return await self.review_repo.get_with_reviewer(db, review.id)
