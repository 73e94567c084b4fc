"""
Tests for admin/dashboard-stats
"""
from datetime import datetime, timedelta

import pytest
from fastapi import status

from portfolio_api.apps.blog.models import BlogPost
from portfolio_api.apps.portfolio.models import Message, Project


class TestDashboardStats:

    @pytest.mark.asyncio
    async def test_counts_and_recent(self, client, test_session):
        base = datetime(2024, 1, 1)
        test_session.add_all([
            Project(title=f"Project {i}", createdAt=base + timedelta(days=i)) for i in range(7)
        ])
        test_session.add(BlogPost(title="Post", slug="post", content="..."))
        test_session.add_all([
            Message(senderName="A", email="a@x", subject="Hi", message="Hello", createdAt=base),
            Message(senderName="B", email="b@x", subject="Yo", message="Hey", createdAt=base + timedelta(days=1)),
        ])
        await test_session.commit()

        response = await client.get("/api/admin/dashboard-stats")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["counts"] == {"projects": 7, "blogs": 1, "messages": 2}
        assert [p["title"] for p in body["recent"]["projects"]] == [
            "Project 6", "Project 5", "Project 4", "Project 3", "Project 2"
        ]
        assert [m["senderName"] for m in body["recent"]["messages"]] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_empty_database(self, client):
        response = await client.get("/api/admin/dashboard-stats")

        assert response.json() == {
            "counts": {"projects": 0, "blogs": 0, "messages": 0},
            "recent": {"projects": [], "messages": []},
        }

    @pytest.mark.asyncio
    async def test_requires_get(self, client):
        response = await client.post("/api/admin/dashboard-stats")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
