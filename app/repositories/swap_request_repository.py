"""
Swap request repository.

Besides the generic CRUD inherited from BaseRepository this provides the
queries the request lifecycle needs: loading a request with both parties
resolved, the duplicate-pending lookup, per-user listings, and the
conditional status update that makes transitions atomic.
"""

from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy import select, update, or_, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.models.swap_request import SwapRequest, SwapRequestStatus
from .base import BaseRepository

logger = logging.getLogger(__name__)

DIRECTION_SENT = "sent"
DIRECTION_RECEIVED = "received"
DIRECTION_BOTH = "both"


class SwapRequestRepository(BaseRepository[SwapRequest]):
    """Repository for SwapRequest with lifecycle-specific queries."""

    def __init__(self):
        super().__init__(SwapRequest)

    async def get_with_parties(
        self,
        db: AsyncSession,
        id: UUID
    ) -> Optional[SwapRequest]:
        """
        Get a swap request with sender and receiver loaded.

        ``populate_existing`` is set so a row already in the session identity
        map is refreshed from the database after a conditional update.
        """
        try:
            stmt = (
                select(SwapRequest)
                .where(SwapRequest.id == id)
                .options(
                    selectinload(SwapRequest.sender),
                    selectinload(SwapRequest.receiver),
                )
                .execution_options(populate_existing=True)
            )
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching swap request {id} with parties: {e}")
            raise

    async def get_pending_between(
        self,
        db: AsyncSession,
        sender_id: UUID,
        receiver_id: UUID
    ) -> Optional[SwapRequest]:
        """Return the pending request for this ordered (sender, receiver) pair, if any."""
        try:
            stmt = (
                select(SwapRequest)
                .where(
                    SwapRequest.sender_id == sender_id,
                    SwapRequest.receiver_id == receiver_id,
                    SwapRequest.status == SwapRequestStatus.PENDING.value,
                )
                .limit(1)
            )
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error checking pending request {sender_id} -> {receiver_id}: {e}")
            raise

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        direction: str = DIRECTION_BOTH
    ) -> list[SwapRequest]:
        """
        List requests where the user is a party, newest first.

        Args:
            db: Active database session
            user_id: UUID of the caller
            direction: "sent", "received", or "both"

        Returns:
            Requests with sender and receiver loaded
        """
        if direction == DIRECTION_SENT:
            criteria = SwapRequest.sender_id == user_id
        elif direction == DIRECTION_RECEIVED:
            criteria = SwapRequest.receiver_id == user_id
        else:
            criteria = or_(
                SwapRequest.sender_id == user_id,
                SwapRequest.receiver_id == user_id,
            )

        try:
            stmt = (
                select(SwapRequest)
                .where(criteria)
                .options(
                    selectinload(SwapRequest.sender),
                    selectinload(SwapRequest.receiver),
                )
                .order_by(desc(SwapRequest.created_at))
            )
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing swap requests for user {user_id}: {e}")
            raise

    async def transition_status(
        self,
        db: AsyncSession,
        id: UUID,
        expected_status: SwapRequestStatus,
        values: dict
    ) -> bool:
        """
        Apply ``values`` only if the request is still in ``expected_status``.

        The status check and the write happen in one UPDATE statement, so two
        concurrent callers cannot both move the same request out of a state.

        Returns:
            True if the row was updated, False if it no longer matched
        """
        try:
            stmt = (
                update(SwapRequest)
                .where(
                    SwapRequest.id == id,
                    SwapRequest.status == expected_status.value,
                )
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            result = await db.execute(stmt)
            await db.flush()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error(f"Error updating status of swap request {id}: {e}")
            await db.rollback()
            raise
