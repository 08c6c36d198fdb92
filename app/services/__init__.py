from .swap_request_service import SwapRequestService
from .skill_service import SkillService
from .review_service import ReviewService

__all__ = [
    "SwapRequestService",
    "SkillService",
    "ReviewService",
]
