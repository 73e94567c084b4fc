"""
Authentication models
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from typing import Optional
from datetime import datetime

from portfolio_api.common.fields import utc_now


class User(SQLModel, table=True):
    """
    Admin user model
    Table: user
    The password column holds the plaintext password compared at login.
    """
    __tablename__ = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    password: str
    name: Optional[str] = Field(default=None)
    avatar: Optional[str] = Field(default=None)
    isActive: bool = Field(default=True)
    createdAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updatedAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())
