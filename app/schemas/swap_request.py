from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal
from datetime import datetime
import uuid
from app.schemas.common import UserSummary


SwapRequestStatusValue = Literal['pending', 'accepted', 'declined', 'completed']
RequestDirection = Literal['sent', 'received', 'both']


class SwapRequestCreate(BaseModel):
    receiver_id: uuid.UUID
    skill_offered: str = Field(..., max_length=200)
    skill_wanted: str = Field(..., max_length=200)
    message: Optional[str] = Field(default=None, max_length=1000)
    scheduled_date: Optional[datetime] = None

    @field_validator('skill_offered', 'skill_wanted')
    @classmethod
    def skill_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Skill is required and cannot be empty')
        return v.strip()


class SwapRequest(BaseModel):
    """Swap request with both parties resolved to display attributes"""
    id: uuid.UUID
    sender_id: uuid.UUID
    receiver_id: uuid.UUID
    sender: Optional[UserSummary] = None
    receiver: Optional[UserSummary] = None
    skill_offered: str
    skill_wanted: str
    message: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    status: SwapRequestStatusValue
    created_at: datetime
    responded_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SwapRequestResponse(BaseModel):
    success: bool = True
    request: SwapRequest


class SwapRequestListResponse(BaseModel):
    success: bool = True
    count: int
    requests: List[SwapRequest]
