from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.core.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.repositories.swap_request_repository import DIRECTION_BOTH
from app.schemas.common import MessageResponse
from app.schemas.swap_request import (
    RequestDirection,
    SwapRequestCreate,
    SwapRequestListResponse,
    SwapRequestResponse,
)
from app.services.swap_request_service import SwapRequestService
import uuid

router = APIRouter()
swap_request_service = SwapRequestService()


@router.get("", response_model=SwapRequestListResponse)
async def list_requests(
    direction: Optional[RequestDirection] = Query(default=None, alias="type"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get requests the current user sent, received, or both (default)"""
    requests = await swap_request_service.list_requests(
        db, current_user.id, direction or DIRECTION_BOTH
    )
    return {"success": True, "count": len(requests), "requests": requests}


@router.get("/{request_id}", response_model=SwapRequestResponse)
async def get_request(
    request_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get a single request; only its sender or receiver may view it"""
    swap_request = await swap_request_service.get_request(db, request_id, current_user.id)
    return {"success": True, "request": swap_request}


@router.post("", response_model=SwapRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_request(
    request_data: SwapRequestCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Send a skill swap request"""
    swap_request = await swap_request_service.create_request(db, current_user.id, request_data)
    await db.commit()
    return {"success": True, "request": swap_request}


@router.put("/{request_id}/accept", response_model=SwapRequestResponse)
async def accept_request(
    request_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Accept a pending request (receiver only)"""
    swap_request = await swap_request_service.accept_request(db, request_id, current_user.id)
    await db.commit()
    return {"success": True, "request": swap_request}


@router.put("/{request_id}/decline", response_model=SwapRequestResponse)
async def decline_request(
    request_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Decline a pending request (receiver only)"""
    swap_request = await swap_request_service.decline_request(db, request_id, current_user.id)
    await db.commit()
    return {"success": True, "request": swap_request}


@router.put("/{request_id}/complete", response_model=SwapRequestResponse)
async def complete_request(
    request_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Mark an accepted request as completed (either party)"""
    swap_request = await swap_request_service.complete_request(db, request_id, current_user.id)
    await db.commit()
    return {"success": True, "request": swap_request}


@router.delete("/{request_id}", response_model=MessageResponse)
async def cancel_request(
    request_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Cancel and delete a request (sender only)"""
    await swap_request_service.cancel_request(db, request_id, current_user.id)
    await db.commit()
    return {"success": True, "message": "Request cancelled successfully"}
