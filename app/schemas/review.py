from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
import uuid
from app.schemas.common import UserSummary


class ReviewCreate(BaseModel):
    request_id: uuid.UUID
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=1000)


class Review(BaseModel):
    id: uuid.UUID
    request_id: Optional[uuid.UUID] = None
    reviewer_id: uuid.UUID
    reviewed_user_id: uuid.UUID
    reviewer: Optional[UserSummary] = None
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReviewResponse(BaseModel):
    success: bool = True
    review: Review


class ReviewListResponse(BaseModel):
    success: bool = True
    count: int
    average_rating: Optional[float] = None
    reviews: List[Review]
