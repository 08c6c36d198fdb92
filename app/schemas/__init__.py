from .auth import Token, UserCreate, UserLogin, RefreshTokenRequest, AuthResponse
from .user import UserPublic, UserPrivate, UserUpdate
from .common import UserSummary, MessageResponse, ErrorResponse
from .skill import Skill, SkillCreate, SkillUpdate
from .swap_request import SwapRequest, SwapRequestCreate, SwapRequestResponse, SwapRequestListResponse
from .review import Review, ReviewCreate
