"""
Integration tests for the skill catalog endpoints.

Covers:
  GET    /api/skills
  GET    /api/skills/{skill_id}
  POST   /api/skills
  PUT    /api/skills/{skill_id}
  DELETE /api/skills/{skill_id}
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from tests.factories import SkillFactory


# ---------------------------------------------------------------------------
# GET /api/skills
# ---------------------------------------------------------------------------
class TestBrowseSkills:
    @pytest.fixture
    async def catalog(self, db_session: AsyncSession, alice: User, bob: User):
        now = datetime.now(timezone.utc)
        guitar = await SkillFactory.create_async(
            db_session, user_id=alice.id, title="Guitar lessons", category="creative",
            created_at=now - timedelta(hours=2),
        )
        spanish = await SkillFactory.create_async(
            db_session, user_id=bob.id, title="Conversational Spanish",
            description="Practice speaking with a native", category="language",
            created_at=now - timedelta(hours=1),
        )
        python = await SkillFactory.create_async(
            db_session, user_id=bob.id, title="Python basics",
            description="Intro to programming", category="tech", created_at=now,
        )
        paused = await SkillFactory.create_async(
            db_session, user_id=alice.id, title="Watercolour", category="creative",
            status="paused", created_at=now,
        )
        return {"guitar": guitar, "spanish": spanish, "python": python, "paused": paused}

    async def test_lists_active_skills_newest_first(self, async_client: AsyncClient, catalog: dict):
        response = await async_client.get("/api/skills")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 3
        assert [s["id"] for s in data["skills"]] == [
            str(catalog["python"].id),
            str(catalog["spanish"].id),
            str(catalog["guitar"].id),
        ]

    async def test_skill_carries_owner_display_attributes(
        self, async_client: AsyncClient, catalog: dict
    ):
        response = await async_client.get("/api/skills?category=language")

        skill = response.json()["skills"][0]
        assert skill["owner"]["name"] == "Bob"
        assert skill["owner"]["verified"] is True

    async def test_filters_by_category(self, async_client: AsyncClient, catalog: dict):
        response = await async_client.get("/api/skills?category=creative")

        data = response.json()
        assert data["count"] == 1
        assert data["skills"][0]["id"] == str(catalog["guitar"].id)

    async def test_search_matches_title_and_description_case_insensitively(
        self, async_client: AsyncClient, catalog: dict
    ):
        by_title = await async_client.get("/api/skills?search=spanish")
        by_description = await async_client.get("/api/skills?search=PROGRAMMING")

        assert [s["id"] for s in by_title.json()["skills"]] == [str(catalog["spanish"].id)]
        assert [s["id"] for s in by_description.json()["skills"]] == [str(catalog["python"].id)]

    async def test_status_filter_shows_paused(self, async_client: AsyncClient, catalog: dict):
        response = await async_client.get("/api/skills?status=paused")

        assert [s["id"] for s in response.json()["skills"]] == [str(catalog["paused"].id)]

    async def test_pagination(self, async_client: AsyncClient, catalog: dict):
        response = await async_client.get("/api/skills?page=2&limit=2")

        data = response.json()
        assert data["page"] == 2
        assert data["total"] == 3
        assert data["total_pages"] == 2
        assert [s["id"] for s in data["skills"]] == [str(catalog["guitar"].id)]

    async def test_unknown_category_is_rejected(self, async_client: AsyncClient):
        response = await async_client.get("/api/skills?category=cooking")
        assert response.status_code == 400


# ---------------------------------------------------------------------------
# GET /api/skills/{skill_id}
# ---------------------------------------------------------------------------
class TestGetSkill:
    async def test_counts_views(self, async_client: AsyncClient, db_session: AsyncSession, alice: User):
        skill = await SkillFactory.create_async(db_session, user_id=alice.id)

        first = await async_client.get(f"/api/skills/{skill.id}")
        second = await async_client.get(f"/api/skills/{skill.id}")

        assert first.json()["skill"]["views"] == 1
        assert second.json()["skill"]["views"] == 2

    async def test_unknown_skill_returns_404(self, async_client: AsyncClient):
        response = await async_client.get(f"/api/skills/{uuid.uuid4()}")
        assert response.status_code == 404


# ---------------------------------------------------------------------------
# POST / PUT / DELETE
# ---------------------------------------------------------------------------
class TestManageSkills:
    async def test_create_assigns_caller_as_owner(
        self, async_client: AsyncClient, alice: User, alice_headers: dict
    ):
        response = await async_client.post(
            "/api/skills",
            headers=alice_headers,
            json={
                "title": "Guitar lessons",
                "description": "Chords, strumming and a first song",
                "category": "creative",
                "proficiency_level": "Expert",
                "skills_wanted": ["Spanish", " "],
            },
        )

        assert response.status_code == 201
        skill = response.json()["skill"]
        assert skill["user_id"] == str(alice.id)
        assert skill["status"] == "active"
        assert skill["availability"] == "Flexible"
        assert skill["skills_wanted"] == ["Spanish"]

    async def test_create_rejects_overlong_title(self, async_client: AsyncClient, alice_headers: dict):
        response = await async_client.post(
            "/api/skills",
            headers=alice_headers,
            json={"title": "x" * 101, "description": "too long"},
        )
        assert response.status_code == 400

    async def test_create_requires_authentication(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/skills", json={"title": "Guitar", "description": "Lessons"}
        )
        assert response.status_code in (401, 403)

    async def test_owner_can_update(
        self, async_client: AsyncClient, db_session: AsyncSession, alice: User, alice_headers: dict
    ):
        skill = await SkillFactory.create_async(db_session, user_id=alice.id)

        response = await async_client.put(
            f"/api/skills/{skill.id}",
            headers=alice_headers,
            json={"status": "paused", "availability": "Evenings"},
        )

        assert response.status_code == 200
        updated = response.json()["skill"]
        assert updated["status"] == "paused"
        assert updated["availability"] == "Evenings"
        assert updated["title"] == skill.title

    async def test_non_owner_cannot_update_or_delete(
        self, async_client: AsyncClient, db_session: AsyncSession, alice: User, bob_headers: dict
    ):
        skill = await SkillFactory.create_async(db_session, user_id=alice.id)

        update = await async_client.put(f"/api/skills/{skill.id}", headers=bob_headers, json={"title": "Mine"})
        delete = await async_client.delete(f"/api/skills/{skill.id}", headers=bob_headers)

        assert update.status_code == 403
        assert delete.status_code == 403

    async def test_owner_can_delete(
        self, async_client: AsyncClient, db_session: AsyncSession, alice: User, alice_headers: dict
    ):
        skill = await SkillFactory.create_async(db_session, user_id=alice.id)

        response = await async_client.delete(f"/api/skills/{skill.id}", headers=alice_headers)

        assert response.status_code == 200
        assert (await async_client.get(f"/api/skills/{skill.id}")).status_code == 404

    @pytest.mark.parametrize("field", ["title", "category", "status", "skills_wanted"])
    async def test_null_for_required_field_is_rejected(
        self,
        async_client: AsyncClient,
        db_session: AsyncSession,
        alice: User,
        alice_headers: dict,
        field: str,
    ):
        skill = await SkillFactory.create_async(db_session, user_id=alice.id)

        response = await async_client.put(
            f"/api/skills/{skill.id}", headers=alice_headers, json={field: None}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        unchanged = (await async_client.get(f"/api/skills/{skill.id}")).json()["skill"]
        assert unchanged["title"] == "Guitar lessons"
        assert unchanged["category"] == "creative"

    async def test_listings_created_within_one_second_keep_creation_order(
        self, async_client: AsyncClient, alice_headers: dict
    ):
        first = await async_client.post(
            "/api/skills", headers=alice_headers, json={"title": "Guitar", "description": "Chords"}
        )
        second = await async_client.post(
            "/api/skills", headers=alice_headers, json={"title": "Ukulele", "description": "Strumming"}
        )

        response = await async_client.get("/api/skills")

        assert [s["id"] for s in response.json()["skills"]] == [
            second.json()["skill"]["id"],
            first.json()["skill"]["id"],
        ]
