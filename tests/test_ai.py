"""
Tests for the AI proxy and upload stub
"""
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from fastapi import status

from portfolio_api import config
from portfolio_api.apps.ai.service import AIChatService, AIServiceError


def provider_response(status_code, payload=None, text=""):
    request = httpx.Request("POST", "https://ai.example.com/chat/completions")
    if payload is not None:
        return httpx.Response(status_code, json=payload, request=request)
    return httpx.Response(status_code, text=text, request=request)


@pytest.fixture
def ai_service():
    service = MagicMock()
    service.generate = AsyncMock(return_value="Generated text")
    service.analyze_github = AsyncMock(return_value="## Overview")
    with patch("portfolio_api.apps.resources.router.get_ai_service", return_value=service):
        yield service


class TestAIEndpoints:

    @pytest.mark.asyncio
    async def test_generate(self, client, ai_service):
        response = await client.post(
            "/api/ai?action=generate", json={"prompt": "Write a bio", "systemPrompt": "Be brief"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"content": "Generated text", "result": "Generated text"}
        ai_service.generate.assert_awaited_once_with("Write a bio", "Be brief")

    @pytest.mark.asyncio
    async def test_generate_requires_prompt(self, client, ai_service):
        response = await client.post("/api/ai?action=generate", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Prompt is required"}

    @pytest.mark.asyncio
    async def test_analyze_github(self, client, ai_service):
        response = await client.post(
            "/api/ai?action=analyze-github", json={"url": "https://github.com/me/repo"}
        )

        assert response.json()["content"] == "## Overview"
        ai_service.analyze_github.assert_awaited_once_with("https://github.com/me/repo")

    @pytest.mark.asyncio
    async def test_analyze_github_requires_url(self, client, ai_service):
        response = await client.post("/api/ai?action=analyze-github", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "URL is required"}

    @pytest.mark.asyncio
    async def test_provider_failure(self, client, ai_service):
        ai_service.generate.side_effect = AIServiceError("AI API Key is not configured")

        response = await client.post("/api/ai?action=generate", json={"prompt": "hi"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "AI Handler Failed", "details": "AI API Key is not configured"}

    @pytest.mark.asyncio
    async def test_non_json_provider_body(self, client, monkeypatch):
        monkeypatch.setattr(config, "AI_API_KEY", "k")
        post = AsyncMock(return_value=provider_response(200, text="<html>gateway</html>"))

        # The test client is an httpx.AsyncClient too; it goes through request(), not post()
        with patch.object(httpx.AsyncClient, "post", new=post):
            generate = await client.request("POST", "/api/ai?action=generate", json={"prompt": "hi"})
            analyze = await client.request(
                "POST", "/api/ai?action=analyze-github", json={"url": "https://github.com/me/repo"}
            )

        assert generate.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert generate.json()["error"] == "AI Handler Failed"
        assert analyze.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert analyze.json()["error"] == "AI Analysis Failed"

    @pytest.mark.asyncio
    async def test_other_action(self, client):
        response = await client.post("/api/ai?action=status")

        assert response.json() == {"result": "AI endpoint ready."}

    @pytest.mark.asyncio
    async def test_requires_post(self, client):
        response = await client.get("/api/ai?action=generate")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


class TestAIChatService:

    @pytest.mark.asyncio
    async def test_missing_key(self):
        service = AIChatService(api_key="")

        with pytest.raises(AIServiceError, match="not configured"):
            await service.generate("hi")

    @pytest.mark.asyncio
    async def test_chat_payload_and_result(self):
        service = AIChatService(api_key="k", api_url="https://ai.example.com/chat/completions", model="m")
        post = AsyncMock(return_value=provider_response(
            200, {"choices": [{"message": {"content": "Hello"}}]}
        ))

        with patch.object(httpx.AsyncClient, "post", new=post):
            result = await service.generate("hi", system_prompt="sys")

        assert result == "Hello"
        kwargs = post.await_args.kwargs
        assert kwargs["json"] == {
            "model": "m",
            "messages": [
                {"role": "system", "content": "sys"},
                {"role": "user", "content": "hi"},
            ],
        }
        assert kwargs["headers"]["Authorization"] == "Bearer k"

    @pytest.mark.asyncio
    async def test_provider_error(self):
        service = AIChatService(api_key="k", api_url="https://ai.example.com/chat/completions")
        post = AsyncMock(return_value=provider_response(429, text="rate limited"))

        with patch.object(httpx.AsyncClient, "post", new=post):
            with pytest.raises(AIServiceError, match="429 rate limited"):
                await service.chat([{"role": "user", "content": "hi"}])

    @pytest.mark.asyncio
    async def test_missing_choices(self):
        service = AIChatService(api_key="k")
        post = AsyncMock(return_value=provider_response(200, {"choices": []}))

        with patch.object(httpx.AsyncClient, "post", new=post):
            assert await service.chat([]) == ""

    @pytest.mark.asyncio
    async def test_non_json_success_body(self):
        service = AIChatService(api_key="k")
        post = AsyncMock(return_value=provider_response(200, text="<html>gateway</html>"))

        with patch.object(httpx.AsyncClient, "post", new=post):
            with pytest.raises(AIServiceError, match="invalid JSON"):
                await service.chat([])


class TestUpload:

    @pytest.mark.asyncio
    async def test_placeholder(self, client):
        response = await client.post("/api/upload")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "url": "https://placehold.co/600x400",
            "fileName": "uploaded.png",
            "mimeType": "image/png",
            "size": 1024,
        }
