"""
AI chat-completion proxy
Talks to any OpenAI-compatible /chat/completions endpoint
"""
import httpx
from typing import Any, Dict, List, Optional
import logging

from portfolio_api import config

logger = logging.getLogger(__name__)

GITHUB_ANALYSIS_PROMPT = (
    "Analyze this GitHub repository URL: {url}.\n"
    "Provide a professional project description in Markdown format.\n"
    "Include:\n"
    "- Project Overview\n"
    "- Key Features (inferred from context or typical features for such projects)\n"
    "- Tech Stack (inferred)\n"
    "- Use professional tone."
)


class AIServiceError(Exception):
    """Provider not configured or answered with an error"""


class AIChatService:
    def __init__(self, api_key: Optional[str] = None, api_url: Optional[str] = None,
                 model: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key if api_key is not None else config.AI_API_KEY
        self.api_url = api_url or config.AI_API_URL
        self.model = model or config.AI_MODEL
        self.timeout = timeout or config.AI_TIMEOUT

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def chat(self, messages: List[Dict[str, str]]) -> str:
        """Send the messages and return the first choice's text ("" when absent)."""
        if not self.api_key:
            raise AIServiceError("AI API Key is not configured")

        payload = {"model": self.model, "messages": messages}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload, headers=self._headers())
        except httpx.RequestError as req_err:
            logger.error(f"AI provider request failed: {str(req_err)}")
            raise AIServiceError(f"AI Provider Error: {str(req_err)}") from req_err

        if response.status_code >= 400:
            raise AIServiceError(f"AI Provider Error: {response.status_code} {response.text}")

        try:
            data: Dict[str, Any] = response.json()
        except ValueError as json_err:
            logger.error(f"AI provider returned a non-JSON body: {response.text[:200]}")
            raise AIServiceError(f"AI Provider Error: invalid JSON response ({str(json_err)})") from json_err

        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            return ""

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return await self.chat(messages)

    async def analyze_github(self, url: str) -> str:
        """Project description in Markdown for a repository URL."""
        return await self.chat([{"role": "user", "content": GITHUB_ANALYSIS_PROMPT.format(url=url)}])


def get_ai_service() -> AIChatService:
    """Built per call so configuration changes are picked up"""
    return AIChatService()
