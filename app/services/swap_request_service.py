"""
Swap request service: the request lifecycle and its authorization rules.

Status flow::

    pending --accept (receiver)--> accepted --complete (either party)--> completed
    pending --decline (receiver)--> declined
    any status --cancel (sender)--> removed

``declined`` and ``completed`` are terminal and nothing returns to
``pending``. Every operation takes the authenticated caller's id explicitly;
authorization is decided here, never by the route.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidOperationError,
    InvalidStateError,
    NotFoundError,
)
from app.models.swap_request import SwapRequest, SwapRequestStatus
from app.repositories.swap_request_repository import SwapRequestRepository, DIRECTION_BOTH
from app.repositories.user_repository import UserRepository
from app.schemas.swap_request import SwapRequestCreate

logger = structlog.get_logger(__name__)


class SwapRequestService:
    """
    Service for creating and moving swap requests through their lifecycle.

    Status checks are made twice: once against the loaded record so the
    caller gets a precise error, and again inside the conditional UPDATE so a
    concurrent transition cannot be overwritten.
    """

    def __init__(
        self,
        swap_request_repo: Optional[SwapRequestRepository] = None,
        user_repo: Optional[UserRepository] = None
    ):
        """
        Initialize service with repositories.

        Args:
            swap_request_repo: SwapRequestRepository instance (creates new if None)
            user_repo: UserRepository instance (creates new if None)
        """
        self.swap_request_repo = swap_request_repo or SwapRequestRepository()
        self.user_repo = user_repo or UserRepository()

    async def _load(self, db: AsyncSession, request_id: UUID) -> SwapRequest:
        swap_request = await self.swap_request_repo.get_with_parties(db, request_id)
        if swap_request is None:
            raise NotFoundError("Request not found")
        return swap_request

    async def create_request(
        self,
        db: AsyncSession,
        caller_id: UUID,
        data: SwapRequestCreate
    ) -> SwapRequest:
        """
        Send a swap request from the caller to ``data.receiver_id``.

        Raises:
            InvalidOperationError: caller is the receiver
            NotFoundError: receiver does not exist
            ConflictError: caller already has a pending request to this receiver
        """
        if data.receiver_id == caller_id:
            raise InvalidOperationError("Cannot send request to yourself")

        receiver = await self.user_repo.get(db, data.receiver_id)
        if receiver is None:
            raise NotFoundError("Receiver not found")

        existing = await self.swap_request_repo.get_pending_between(db, caller_id, data.receiver_id)
        if existing is not None:
            raise ConflictError("You already have a pending request with this user")

        created = await self.swap_request_repo.create(
            db,
            {
                "sender_id": caller_id,
                "receiver_id": data.receiver_id,
                "skill_offered": data.skill_offered,
                "skill_wanted": data.skill_wanted,
                "message": data.message,
                "scheduled_date": data.scheduled_date,
                "status": SwapRequestStatus.PENDING.value,
            },
        )

        logger.info(
            "swap_request_created",
            swap_request_id=str(created.id),
            sender_id=str(caller_id),
            receiver_id=str(data.receiver_id),
        )
        return await self._load(db, created.id)

    async def get_request(
        self,
        db: AsyncSession,
        request_id: UUID,
        caller_id: UUID
    ) -> SwapRequest:
        swap_request = await self._load(db, request_id)
        if not swap_request.is_party(caller_id):
            raise ForbiddenError("Not authorized to view this request")
        return swap_request

    async def list_requests(
        self,
        db: AsyncSession,
        caller_id: UUID,
        direction: str = DIRECTION_BOTH
    ) -> list[SwapRequest]:
        """Requests the caller sent, received, or both; newest first."""
        return await self.swap_request_repo.list_for_user(db, caller_id, direction)

    async def _respond(
        self,
        db: AsyncSession,
        request_id: UUID,
        caller_id: UUID,
        new_status: SwapRequestStatus,
        action: str
    ) -> SwapRequest:
        swap_request = await self._load(db, request_id)

        if swap_request.receiver_id != caller_id:
            raise ForbiddenError(f"Not authorized to {action} this request")

        current = SwapRequestStatus(swap_request.status)
        if current != SwapRequestStatus.PENDING:
            raise InvalidStateError(f"Cannot {action} a request that is {current.value}")

        updated = await self.swap_request_repo.transition_status(
            db,
            request_id,
            SwapRequestStatus.PENDING,
            {
                "status": new_status.value,
                "responded_at": datetime.now(timezone.utc),
            },
        )
        if not updated:
            raise InvalidStateError("Request has already been responded to")

        logger.info(
            f"swap_request_{new_status.value}",
            swap_request_id=str(request_id),
            caller_id=str(caller_id),
        )
        return await self._load(db, request_id)

    async def accept_request(
        self,
        db: AsyncSession,
        request_id: UUID,
        caller_id: UUID
    ) -> SwapRequest:
        """Receiver accepts a pending request."""
        return await self._respond(db, request_id, caller_id, SwapRequestStatus.ACCEPTED, "accept")

    async def decline_request(
        self,
        db: AsyncSession,
        request_id: UUID,
        caller_id: UUID
    ) -> SwapRequest:
        """Receiver declines a pending request."""
        return await self._respond(db, request_id, caller_id, SwapRequestStatus.DECLINED, "decline")

    async def complete_request(
        self,
        db: AsyncSession,
        request_id: UUID,
        caller_id: UUID
    ) -> SwapRequest:
        """
        Either party marks an accepted swap as done.

        Only ``accepted`` requests can be completed; completing a pending or
        declined request is rejected with InvalidStateError.
        """
        swap_request = await self._load(db, request_id)

        if not swap_request.is_party(caller_id):
            raise ForbiddenError("Not authorized to complete this request")

        current = SwapRequestStatus(swap_request.status)
        if current != SwapRequestStatus.ACCEPTED:
            raise InvalidStateError(f"Only accepted requests can be completed (request is {current.value})")

        updated = await self.swap_request_repo.transition_status(
            db,
            request_id,
            SwapRequestStatus.ACCEPTED,
            {"status": SwapRequestStatus.COMPLETED.value},
        )
        if not updated:
            raise InvalidStateError("Request is no longer accepted")

        logger.info(
            "swap_request_completed",
            swap_request_id=str(request_id),
            caller_id=str(caller_id),
        )
        return await self._load(db, request_id)

    async def cancel_request(
        self,
        db: AsyncSession,
        request_id: UUID,
        caller_id: UUID
    ) -> None:
        """
        Sender permanently removes a request, whatever its status.

        The receiver cannot cancel; they decline instead.
        """
        swap_request = await self._load(db, request_id)

        if swap_request.sender_id != caller_id:
            raise ForbiddenError("Not authorized to delete this request")

        deleted = await self.swap_request_repo.delete(db, request_id)
        if not deleted:
            raise NotFoundError("Request not found")

        logger.info(
            "swap_request_cancelled",
            swap_request_id=str(request_id),
            caller_id=str(caller_id),
            status=swap_request.status,
        )
