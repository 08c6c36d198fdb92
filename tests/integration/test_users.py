"""
Integration tests for user profile endpoints.

Covers:
  GET /api/users/{user_id}
  PUT /api/users/me
  GET /api/users/{user_id}/skills
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from tests.factories import SkillFactory


class TestGetUser:
    async def test_public_profile_hides_email(self, async_client: AsyncClient, bob: User):
        response = await async_client.get(f"/api/users/{bob.id}")

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["name"] == "Bob"
        assert user["verified"] is True
        assert "email" not in user

    async def test_unknown_user_returns_404(self, async_client: AsyncClient):
        response = await async_client.get(f"/api/users/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestUpdateMe:
    async def test_updates_profile_fields(self, async_client: AsyncClient, alice: User, alice_headers: dict):
        response = await async_client.put(
            "/api/users/me",
            headers=alice_headers,
            json={"bio": "Guitarist learning Spanish", "location": "Lisbon"},
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["bio"] == "Guitarist learning Spanish"
        assert user["location"] == "Lisbon"
        assert user["name"] == "Alice"

    async def test_blank_name_is_rejected(self, async_client: AsyncClient, alice_headers: dict):
        response = await async_client.put("/api/users/me", headers=alice_headers, json={"name": "  "})
        assert response.status_code == 400

    async def test_requires_authentication(self, async_client: AsyncClient):
        response = await async_client.put("/api/users/me", json={"bio": "x"})
        assert response.status_code in (401, 403)


class TestUserSkills:
    async def test_lists_owned_skills_newest_first(
        self, async_client: AsyncClient, db_session: AsyncSession, alice: User, bob: User
    ):
        now = datetime.now(timezone.utc)
        older = await SkillFactory.create_async(db_session, user_id=alice.id, title="Guitar", created_at=now - timedelta(days=1))
        newer = await SkillFactory.create_async(db_session, user_id=alice.id, title="Ukulele", created_at=now)
        await SkillFactory.create_async(db_session, user_id=bob.id, title="Spanish")

        response = await async_client.get(f"/api/users/{alice.id}/skills")

        data = response.json()
        assert data["count"] == 2
        assert [s["id"] for s in data["skills"]] == [str(newer.id), str(older.id)]
