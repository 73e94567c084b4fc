"""
Pydantic schemas for authentication module
"""
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    """Login request schema"""
    email: Optional[str] = None
    password: Optional[str] = None


class UserSummary(BaseModel):
    """Authenticated user as returned to the admin UI"""
    id: int
    email: Optional[str] = None
    name: Optional[str] = None
    role: str = "admin"


class LoginResponse(BaseModel):
    """Login response schema"""
    token: str
    user: UserSummary


class CurrentUserResponse(BaseModel):
    """Response schema for auth/me"""
    id: int
    email: Optional[str] = None
    name: Optional[str] = None
    avatar: Optional[str] = None
    isActive: Optional[bool] = None
    role: str = "admin"

    class Config:
        from_attributes = True
