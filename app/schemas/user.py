from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
import uuid


class UserPublic(BaseModel):
    """Profile visible to anyone; never includes the email address"""
    id: uuid.UUID
    name: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    verified: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserPrivate(UserPublic):
    """Profile returned to its owner"""
    email: EmailStr


class UserUpdate(BaseModel):
    name: Optional[str] = None
    avatar: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = Field(default=None, max_length=1000)
    location: Optional[str] = Field(default=None, max_length=255)

    @field_validator('name')
    @classmethod
    def name_must_have_two_characters_if_provided(cls, v):
        """If name is provided, it must be at least 2 non-whitespace characters"""
        if v is not None and len(v.strip()) < 2:
            raise ValueError('Name must be at least 2 characters')
        return v.strip() if v else v


class UserResponse(BaseModel):
    success: bool = True
    user: UserPublic


class CurrentUserResponse(BaseModel):
    success: bool = True
    user: UserPrivate
