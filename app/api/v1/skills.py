from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.core.database import get_db
from app.api.deps import get_current_user
from app.models.skill import SkillCategory, SkillStatus
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.skill import SkillCreate, SkillListResponse, SkillResponse, SkillUpdate
from app.services.skill_service import SkillService
from app.utils.pagination import calculate_total_pages
import uuid

router = APIRouter()
skill_service = SkillService()


@router.get("", response_model=SkillListResponse)
async def list_skills(
    category: Optional[SkillCategory] = None,
    search: Optional[str] = Query(default=None, max_length=100),
    status_filter: SkillStatus = Query(default=SkillStatus.ACTIVE, alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Browse skill listings (public)"""
    skills, total = await skill_service.browse(
        db,
        page=page,
        limit=limit,
        category=category.value if category else None,
        search=search,
        status_filter=status_filter.value,
    )
    return {
        "success": True,
        "count": len(skills),
        "total": total,
        "page": page,
        "total_pages": calculate_total_pages(total, limit),
        "skills": skills,
    }


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(skill_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Get a single listing and count the view"""
    skill = await skill_service.get_skill(db, skill_id, count_view=True)
    await db.commit()
    return {"success": True, "skill": skill}


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    skill_data: SkillCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List a new skill owned by the current user"""
    skill = await skill_service.create_skill(db, current_user.id, skill_data)
    await db.commit()
    return {"success": True, "skill": skill}


@router.put("/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: uuid.UUID,
    skill_data: SkillUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Update a listing (owner only)"""
    skill = await skill_service.update_skill(db, skill_id, current_user.id, skill_data)
    await db.commit()
    return {"success": True, "skill": skill}


@router.delete("/{skill_id}", response_model=MessageResponse)
async def delete_skill(
    skill_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Delete a listing (owner only)"""
    await skill_service.delete_skill(db, skill_id, current_user.id)
    await db.commit()
    return {"success": True, "message": "Skill deleted successfully"}
