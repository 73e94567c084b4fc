"""
Blog models
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional
from datetime import datetime

from portfolio_api.common.fields import utc_now


class BlogCategory(SQLModel, table=True):
    __tablename__ = "blog_category"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    slug: str = Field(unique=True)
    description: Optional[str] = Field(default=None)


class BlogPost(SQLModel, table=True):
    """
    Blog post model
    Table: blog_post
    views and likes are counters, only ever changed with atomic increments.
    """
    __tablename__ = "blog_post"

    id: Optional[int] = Field(default=None, primary_key=True)
    categoryId: Optional[int] = Field(
        default=None, foreign_key="blog_category.id", ondelete="SET NULL", index=True
    )
    title: str
    slug: str = Field(unique=True, index=True)
    excerpt: Optional[str] = Field(default=None)
    content: str
    coverImage: Optional[str] = Field(default=None)
    tags: str = Field(default="[]")
    is_published: bool = Field(default=False)
    published_at: Optional[datetime] = Field(default=None, sa_type=DateTime())
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    views: int = Field(default=0)
    likes: int = Field(default=0)

    category: Optional[BlogCategory] = Relationship()


class BlogComment(SQLModel, table=True):
    """
    Reader comment, approved on creation
    Table: blog_comment
    """
    __tablename__ = "blog_comment"

    id: Optional[int] = Field(default=None, primary_key=True)
    postId: int = Field(foreign_key="blog_post.id", ondelete="CASCADE", index=True)
    name: str
    email: str
    content: str
    avatar: Optional[str] = Field(default=None)
    createdAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    isApproved: bool = Field(default=True)

    post: Optional[BlogPost] = Relationship()


class BlogLike(SQLModel, table=True):
    """
    Append-only like log
    Table: blog_like
    """
    __tablename__ = "blog_like"

    id: Optional[int] = Field(default=None, primary_key=True)
    postId: int = Field(foreign_key="blog_post.id", ondelete="CASCADE", index=True)
    ipHash: Optional[str] = Field(default=None, index=True)
    createdAt: datetime = Field(default_factory=utc_now, sa_type=DateTime())
