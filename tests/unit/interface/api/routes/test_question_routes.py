"""HTTP tests for question, view and health routes."""

from uuid import uuid4

import pytest


class TestQuestionRoutes:
    @pytest.mark.asyncio
    async def test_create_and_fetch_question(self, client, alice):
        created = await client.post(
            "/questions",
            json={
                "title": "What does yield do?",
                "description": "In Python generators.",
                "tags": ["Python", "generators"],
            },
            headers=alice.headers,
        )

        assert created.status_code == 201
        question = created.json()
        assert question["authorId"] == alice.user_id
        assert question["tags"] == ["python", "generators"]

        detail = await client.get(f"/questions/{question['id']}")

        assert detail.status_code == 200
        body = detail.json()
        assert body["title"] == "What does yield do?"
        assert body["score"] == 0
        assert body["answerCount"] == 0
        assert body["answers"] == []

    @pytest.mark.asyncio
    async def test_create_requires_authentication(self, client):
        response = await client.post(
            "/questions",
            json={"title": "T", "description": "D", "tags": ["x"]},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_requires_tags(self, client, alice):
        response = await client.post(
            "/questions",
            json={"title": "T", "description": "D", "tags": []},
            headers=alice.headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_filters_and_paginates(self, client, alice):
        for title, tag in [("Rust lifetimes", "rust"), ("Go channels", "go")]:
            await client.post(
                "/questions",
                json={"title": title, "description": "Question body", "tags": [tag]},
                headers=alice.headers,
            )

        everything = await client.get("/questions")
        by_tag = await client.get("/questions", params={"tag": "rust"})
        by_search = await client.get("/questions", params={"search": "CHANNELS"})
        paged = await client.get("/questions", params={"limit": 1, "page": 2})

        assert everything.json()["pagination"] == {
            "page": 1,
            "limit": 20,
            "total": 2,
            "pages": 1,
        }
        assert [q["title"] for q in by_tag.json()["questions"]] == ["Rust lifetimes"]
        assert [q["title"] for q in by_search.json()["questions"]] == ["Go channels"]
        assert paged.json()["pagination"]["pages"] == 2
        assert len(paged.json()["questions"]) == 1

    @pytest.mark.asyncio
    async def test_unknown_question_is_404(self, client):
        response = await client.get(f"/questions/{uuid4()}")

        assert response.status_code == 404


class TestViewRoutes:
    @pytest.mark.asyncio
    async def test_views_are_counted_without_auth(self, client, alice):
        created = await client.post(
            "/questions",
            json={"title": "T", "description": "D", "tags": ["x"]},
            headers=alice.headers,
        )
        question_id = created.json()["id"]

        first = await client.post("/views", json={"questionId": question_id})
        second = await client.post("/views", json={"questionId": question_id})

        assert first.json() == {"success": True, "views": 1}
        assert second.json()["views"] == 2

    @pytest.mark.asyncio
    async def test_missing_question_id_is_400(self, client):
        response = await client.post("/views", json={})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_question_is_404(self, client):
        response = await client.post("/views", json={"questionId": str(uuid4())})

        assert response.status_code == 404


class TestHealthRoute:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "gitSha" in body
