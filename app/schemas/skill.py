from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
import uuid
from app.models.skill import SkillCategory, ProficiencyLevel, SkillStatus
from app.schemas.common import UserSummary


class SkillBase(BaseModel):
    title: str = Field(..., max_length=100)
    description: str = Field(..., max_length=500)
    category: SkillCategory = SkillCategory.OTHER
    proficiency_level: ProficiencyLevel = ProficiencyLevel.INTERMEDIATE
    skills_wanted: List[str] = Field(default_factory=list)
    availability: str = Field(default="Flexible", max_length=100)
    images: List[str] = Field(default_factory=list)

    @field_validator('title', 'description')
    @classmethod
    def must_not_be_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('Please add a title and description')
        return v.strip()

    @field_validator('skills_wanted')
    @classmethod
    def drop_blank_wanted_skills(cls, v):
        return [s.strip() for s in v if s and s.strip()]


class SkillCreate(SkillBase):
    pass


class SkillUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[SkillCategory] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    skills_wanted: Optional[List[str]] = None
    availability: Optional[str] = Field(default=None, max_length=100)
    images: Optional[List[str]] = None
    status: Optional[SkillStatus] = None

    @field_validator(
        'title', 'description', 'category', 'proficiency_level',
        'skills_wanted', 'images', 'status',
        mode='before'
    )
    @classmethod
    def reject_explicit_null(cls, v, info):
        """Omit a field to leave it unchanged; null cannot clear a required column"""
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v

    @field_validator('title', 'description')
    @classmethod
    def must_not_be_blank_if_provided(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Title and description cannot be empty')
        return v.strip() if v else v


class Skill(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    owner: Optional[UserSummary] = None
    title: str
    description: str
    category: SkillCategory
    proficiency_level: ProficiencyLevel
    skills_wanted: List[str] = []
    availability: Optional[str] = None
    images: List[str] = []
    status: SkillStatus
    views: int = 0
    rating: float = 0
    verified: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_validator('skills_wanted', 'images', mode='before')
    @classmethod
    def none_as_empty_list(cls, v):
        return v or []


class SkillResponse(BaseModel):
    success: bool = True
    skill: Skill


class SkillListResponse(BaseModel):
    success: bool = True
    count: int
    total: int
    page: int
    total_pages: int
    skills: List[Skill]


class UserSkillsResponse(BaseModel):
    success: bool = True
    count: int
    skills: List[Skill]
