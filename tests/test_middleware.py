"""
Tests for CORS, cache headers and last-resort error handling
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status

from portfolio_api import config
from portfolio_api.apps.resources.service import ResourceService
from portfolio_api.middleware.cache import NO_STORE, PUBLIC_CACHE


class TestCors:

    @pytest.mark.asyncio
    async def test_preflight_short_circuits(self, client):
        response = await client.options("/api/projects")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert "PATCH" in response.headers["access-control-allow-methods"]
        assert "Authorization" in response.headers["access-control-allow-headers"]

    @pytest.mark.asyncio
    async def test_headers_on_errors(self, client):
        response = await client.get("/api/unknown")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.headers["access-control-allow-origin"] == "*"


class TestCacheHeaders:

    @pytest.mark.asyncio
    async def test_public_resource_in_production(self, client, production_mode):
        response = await client.get("/api/projects")

        assert response.headers["cache-control"] == PUBLIC_CACHE

    @pytest.mark.asyncio
    async def test_development_is_never_cached(self, client):
        response = await client.get("/api/projects")

        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_authorized_request_not_cached(self, client, production_mode):
        response = await client.get("/api/projects", headers={"Authorization": "Bearer demo-token"})

        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_private_resource_not_cached(self, client, production_mode):
        response = await client.get("/api/messages")

        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_comments_not_cached(self, client, production_mode):
        response = await client.get("/api/blog-posts/1?action=comments")

        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_writes_not_cached(self, client, production_mode):
        response = await client.post("/api/social-links", json={"platform": "x", "url": "y"})

        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_health_not_cached(self, client, production_mode):
        response = await client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "ok"
        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_errors_not_cached(self, client, production_mode):
        response = await client.get("/api/projects/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.headers["cache-control"] == NO_STORE


class TestUnhandledErrors:

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_500(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEBUG", False)
        with patch.object(ResourceService, "list_items", new=AsyncMock(side_effect=RuntimeError("boom"))):
            response = await client.get("/api/projects")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Internal Server Error", "details": "boom"}
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["cache-control"] == NO_STORE

    @pytest.mark.asyncio
    async def test_stack_included_in_debug(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEBUG", True)
        with patch.object(ResourceService, "list_items", new=AsyncMock(side_effect=RuntimeError("boom"))):
            response = await client.get("/api/projects")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "RuntimeError: boom" in response.json()["stack"]


class TestRoot:

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Portfolio CMS API"
