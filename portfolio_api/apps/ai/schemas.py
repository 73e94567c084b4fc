"""
Pydantic schemas for the AI proxy
"""
from pydantic import BaseModel
from typing import Optional


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None
    systemPrompt: Optional[str] = None


class AnalyzeGithubRequest(BaseModel):
    url: Optional[str] = None


class AIContentResponse(BaseModel):
    """The assistant text, under both keys the admin UI reads"""
    content: str
    result: str
