from pydantic import BaseModel
from typing import Optional
import uuid


class UserSummary(BaseModel):
    """Display attributes of a user embedded in other resources"""
    id: uuid.UUID
    name: str
    avatar: Optional[str] = None
    verified: bool = False

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Shape of every failed response"""
    success: bool = False
    error: Optional[str] = None
    message: str
