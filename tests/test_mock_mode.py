"""
Tests for MOCK_DB mode: synthetic responses, no database access
"""
import pytest
from fastapi import status

from portfolio_api.apps.resources.service import ResourceService
from portfolio_api.database import get_async_session
from portfolio_api.main import app


class NoDatabaseSession:
    """Fails the test if anything touches the database"""

    async def execute(self, *args, **kwargs):
        raise AssertionError("database accessed in mock mode")

    async def scalar(self, *args, **kwargs):
        raise AssertionError("database accessed in mock mode")


@pytest.fixture
def mock_client(client, mock_db_mode):
    async def override_get_async_session():
        yield NoDatabaseSession()

    app.dependency_overrides[get_async_session] = override_get_async_session
    return client


class TestMockMode:

    @pytest.mark.asyncio
    async def test_login_echoes_email(self, mock_client):
        response = await mock_client.post("/api/auth/login", json={"email": "dev@example.com"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["token"] == "mock-jwt-token"
        assert response.json()["user"]["email"] == "dev@example.com"

    @pytest.mark.asyncio
    async def test_me(self, mock_client):
        response = await mock_client.get("/api/auth/me")

        assert response.json() == {"id": 999, "email": "mock@example.com", "name": "Mock User", "role": "admin"}

    @pytest.mark.asyncio
    async def test_dashboard(self, mock_client):
        response = await mock_client.get("/api/admin/dashboard-stats")

        assert response.json() == {
            "counts": {"projects": 10, "blogs": 5, "messages": 3},
            "recent": {"projects": [], "messages": []},
        }

    @pytest.mark.asyncio
    async def test_create_echoes_body(self, mock_client):
        response = await mock_client.post("/api/projects", json={"title": "Demo"})

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["title"] == "Demo"
        assert isinstance(body["id"], int)
        assert "createdAt" in body

    @pytest.mark.asyncio
    async def test_update_echoes_id(self, mock_client):
        response = await mock_client.put("/api/projects/8", json={"title": "Demo"})

        assert response.json()["id"] == 8
        assert "updatedAt" in response.json()

    @pytest.mark.asyncio
    async def test_reads(self, mock_client):
        item = await mock_client.get("/api/skills/3")
        items = await mock_client.get("/api/skills")

        assert item.json()["id"] == 3
        assert item.json()["title"] == "Mock Item"
        assert len(items.json()) == 1

    @pytest.mark.asyncio
    async def test_delete(self, mock_client):
        response = await mock_client.delete("/api/anything/1")

        assert response.json() == {"success": True}

    @pytest.mark.asyncio
    async def test_health_passes_through(self, mock_client):
        response = await mock_client.get("/api/health")

        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_upload_passes_through(self, mock_client):
        response = await mock_client.post("/api/upload")

        assert response.json()["fileName"] == "uploaded.png"
