from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from app.schemas.user import UserPrivate


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator('name')
    @classmethod
    def name_must_have_two_characters(cls, v):
        if not v or len(v.strip()) < 2:
            raise ValueError('Name must be at least 2 characters')
        return v.strip()

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class AuthResponse(Token):
    success: bool = True
    user: Optional[UserPrivate] = None
