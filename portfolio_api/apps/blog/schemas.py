"""
Pydantic schemas for blog interactions
"""
from pydantic import BaseModel
from typing import Optional


class CommentCreate(BaseModel):
    """Reader comment submission"""
    name: Optional[str] = None
    email: Optional[str] = None
    content: Optional[str] = None
    avatar: Optional[str] = None


class LikeResponse(BaseModel):
    success: bool = True
    likes: int


class ViewResponse(BaseModel):
    success: bool = True
    views: int
