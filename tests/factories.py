"""
Async factories for the ORM models.

Usage example (inside an async test with db_session fixture):

    alice = await UserFactory.create_async(db_session)
    bob = await UserFactory.create_async(db_session)
    swap = await SwapRequestFactory.create_async(
        db_session, sender_id=alice.id, receiver_id=bob.id
    )
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from app.core.security import get_password_hash
from app.models.review import Review
from app.models.skill import Skill
from app.models.swap_request import SwapRequest, SwapRequestStatus
from app.models.user import User

# Hash once; bcrypt is deliberately slow
_PASSWORD_HASH = get_password_hash("Password1")


# ---------------------------------------------------------------------------
# Base async factory helper
# ---------------------------------------------------------------------------
class _AsyncFactory:
    """Minimal async factory helper.

    Subclasses declare ``_model`` (the ORM class) and override ``_defaults()``
    to supply default column values.  Call ``create_async(session, **kwargs)``
    to insert a row and return the flushed instance.
    """

    _model: type

    @classmethod
    def _defaults(cls) -> dict[str, Any]:
        return {}

    @classmethod
    async def create_async(cls, session, **kwargs) -> Any:
        """Create and flush an ORM instance within the given session."""
        data = {**cls._defaults(), **kwargs}
        instance = cls._model(**data)
        session.add(instance)
        await session.flush()
        return instance

    @classmethod
    def build(cls, **kwargs) -> Any:
        """Build an unsaved ORM instance (no DB interaction)."""
        data = {**cls._defaults(), **kwargs}
        return cls._model(**data)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
class UserFactory(_AsyncFactory):
    _model = User

    @classmethod
    def _defaults(cls) -> dict[str, Any]:
        suffix = uuid.uuid4().hex[:8]
        return {
            "id": uuid.uuid4(),
            "email": f"user_{suffix}@example.com",
            "password_hash": _PASSWORD_HASH,
            "name": f"Test User {suffix}",
            "avatar": None,
            "verified": False,
        }


class SkillFactory(_AsyncFactory):
    """Requires a user_id kwarg."""

    _model = Skill

    @classmethod
    def _defaults(cls) -> dict[str, Any]:
        return {
            "id": uuid.uuid4(),
            "title": "Guitar lessons",
            "description": "Acoustic guitar for beginners",
            "category": "creative",
            "proficiency_level": "Expert",
            "skills_wanted": ["Spanish"],
            "availability": "Weekends",
            "images": [],
            "status": "active",
            "views": 0,
            "rating": 0,
            "verified": False,
            "created_at": datetime.now(timezone.utc),
        }


class SwapRequestFactory(_AsyncFactory):
    """Requires sender_id and receiver_id kwargs."""

    _model = SwapRequest

    @classmethod
    def _defaults(cls) -> dict[str, Any]:
        return {
            "id": uuid.uuid4(),
            "skill_offered": "Guitar",
            "skill_wanted": "Spanish",
            "message": "Happy to swap lessons on weekends",
            "status": SwapRequestStatus.PENDING.value,
            "created_at": datetime.now(timezone.utc),
        }


class ReviewFactory(_AsyncFactory):
    """Requires request_id, reviewer_id and reviewed_user_id kwargs."""

    _model = Review

    @classmethod
    def _defaults(cls) -> dict[str, Any]:
        return {
            "id": uuid.uuid4(),
            "rating": 5,
            "comment": "Clear explanations, very patient",
            "created_at": datetime.now(timezone.utc),
        }
