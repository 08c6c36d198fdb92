"""
Skill service: catalog browsing plus owner-only listing management.
"""

from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.core.exceptions import ForbiddenError, NotFoundError
from app.models.skill import Skill, SkillStatus
from app.repositories.skill_repository import SkillRepository
from app.schemas.skill import SkillCreate, SkillUpdate
from app.utils.pagination import calculate_offset

logger = structlog.get_logger(__name__)


class SkillService:
    """Service for skill listings."""

    def __init__(self, skill_repo: Optional[SkillRepository] = None):
        self.skill_repo = skill_repo or SkillRepository()

    async def browse(
        self,
        db: AsyncSession,
        page: int = 1,
        limit: int = 20,
        category: Optional[str] = None,
        search: Optional[str] = None,
        status_filter: Optional[str] = SkillStatus.ACTIVE.value
    ) -> tuple[list[Skill], int]:
        """
        Get a page of listings matching the filters.

        Args:
            db: Active database session
            page: Page number (1-indexed)
            limit: Items per page
            category: Optional category filter
            search: Optional text matched against title and description
            status_filter: Listing status, active by default

        Returns:
            Tuple of (skills, total count)
        """
        return await self.skill_repo.search(
            db,
            category=category,
            search=search,
            status_filter=status_filter,
            skip=calculate_offset(page, limit),
            limit=limit,
        )

    async def get_skill(self, db: AsyncSession, skill_id: UUID, count_view: bool = False) -> Skill:
        skill = await self.skill_repo.get_with_owner(db, skill_id)
        if skill is None:
            raise NotFoundError("Skill not found")
        if count_view:
            await self.skill_repo.increment_views(db, skill_id)
            skill = await self.skill_repo.get_with_owner(db, skill_id)
        return skill

    async def list_user_skills(self, db: AsyncSession, user_id: UUID) -> list[Skill]:
        return await self.skill_repo.list_for_owner(db, user_id)

    async def create_skill(self, db: AsyncSession, caller_id: UUID, data: SkillCreate) -> Skill:
        values = data.model_dump(mode="json")
        values["user_id"] = caller_id
        skill = await self.skill_repo.create(db, values)
        logger.info("skill_created", skill_id=str(skill.id), user_id=str(caller_id))
        return await self.skill_repo.get_with_owner(db, skill.id)

    async def _owned(self, db: AsyncSession, skill_id: UUID, caller_id: UUID, action: str) -> Skill:
        skill = await self.skill_repo.get_with_owner(db, skill_id)
        if skill is None:
            raise NotFoundError("Skill not found")
        if skill.user_id != caller_id:
            raise ForbiddenError(f"Not authorized to {action} this skill")
        return skill

    async def update_skill(
        self,
        db: AsyncSession,
        skill_id: UUID,
        caller_id: UUID,
        data: SkillUpdate
    ) -> Skill:
        skill = await self._owned(db, skill_id, caller_id, "update")
        changes = data.model_dump(mode="json", exclude_unset=True)
        await self.skill_repo.update(db, skill, changes)
        logger.info("skill_updated", skill_id=str(skill_id), fields=sorted(changes))
        return await self.skill_repo.get_with_owner(db, skill_id)

    async def delete_skill(self, db: AsyncSession, skill_id: UUID, caller_id: UUID) -> None:
        await self._owned(db, skill_id, caller_id, "delete")
        await self.skill_repo.delete(db, skill_id)
        logger.info("skill_deleted", skill_id=str(skill_id), user_id=str(caller_id))
