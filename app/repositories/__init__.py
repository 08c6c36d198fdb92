# Repositories package
from .base import BaseRepository
from .user_repository import UserRepository
from .skill_repository import SkillRepository
from .swap_request_repository import SwapRequestRepository
from .review_repository import ReviewRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SkillRepository",
    "SwapRequestRepository",
    "ReviewRepository",
]
