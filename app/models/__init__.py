from .user import User
from .skill import Skill, SkillCategory, SkillStatus, ProficiencyLevel
from .swap_request import SwapRequest, SwapRequestStatus
from .review import Review

__all__ = [
    "User", "Skill", "SkillCategory", "SkillStatus", "ProficiencyLevel",
    "SwapRequest", "SwapRequestStatus", "Review",
]
