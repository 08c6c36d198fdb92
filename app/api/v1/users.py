from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.api.deps import get_current_user
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.skill import UserSkillsResponse
from app.schemas.user import CurrentUserResponse, UserResponse, UserUpdate
from app.services.skill_service import SkillService
import uuid

router = APIRouter()
user_repo = UserRepository()
skill_service = SkillService()


@router.put("/me", response_model=CurrentUserResponse)
async def update_me(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Update the current user's profile"""
    user = await user_repo.update(db, current_user, user_update.model_dump(exclude_unset=True, exclude_none=True))
    await db.commit()
    return {"success": True, "user": user}


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Get a user's public profile"""
    user = await user_repo.get(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return {"success": True, "user": user}


@router.get("/{user_id}/skills", response_model=UserSkillsResponse)
async def get_user_skills(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Get every listing a user owns, newest first"""
    user = await user_repo.get(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    skills = await skill_service.list_user_skills(db, user_id)
    return {"success": True, "count": len(skills), "skills": skills}
