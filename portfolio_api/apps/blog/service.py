"""
Blog interaction service
Slug lookup, reader comments and the like/view counters
"""
import hashlib
import logging
from typing import Any, Dict, List

from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from portfolio_api import config
from portfolio_api.apps.blog.models import BlogComment, BlogLike, BlogPost
from portfolio_api.apps.blog.schemas import CommentCreate, LikeResponse, ViewResponse
from portfolio_api.apps.resources.service import serialize

logger = logging.getLogger(__name__)

posts = BlogPost.__table__


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


def hash_ip(ip: str) -> str:
    return hashlib.sha256(ip.encode("utf-8")).hexdigest()


def parse_like_count(body: Dict[str, Any]) -> int:
    """`count` from the body; anything unusable (missing, non-numeric, 0) counts as 1"""
    try:
        count = int(body.get("count") or 1)
    except (TypeError, ValueError):
        return 1
    return count or 1


async def _ensure_post(session: AsyncSession, post_id: int):
    result = await session.execute(select(BlogPost.id).where(BlogPost.id == post_id))
    if result.scalar_one_or_none() is None:
        raise _post_not_found()


async def get_by_slug(session: AsyncSession, slug: str) -> Dict[str, Any]:
    """Post with its category, like total and approved comment count"""
    if not slug:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Slug required")

    result = await session.execute(
        select(BlogPost)
        .options(selectinload(BlogPost.category))
        .where(BlogPost.slug == slug)
    )
    post = result.scalars().first()
    if post is None:
        raise _post_not_found()

    comments_count = await session.scalar(
        select(func.count())
        .select_from(BlogComment)
        .where(and_(BlogComment.postId == post.id, BlogComment.isApproved.is_(True)))
    )

    data = serialize(post, ("category",))
    data["likes"] = post.likes or 0
    data["comments_count"] = int(comments_count or 0)
    return data


async def list_comments(session: AsyncSession, post_id: int) -> List[Dict[str, Any]]:
    """Approved comments, newest first"""
    result = await session.execute(
        select(BlogComment)
        .where(and_(BlogComment.postId == post_id, BlogComment.isApproved.is_(True)))
        .order_by(BlogComment.createdAt.desc(), BlogComment.id.desc())
    )
    return [comment.model_dump() for comment in result.scalars().all()]


async def add_comment(session: AsyncSession, post_id: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Append a comment; comments are approved on creation"""
    try:
        request = CommentCreate.model_validate(body)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid comment")

    if not request.name or not request.content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name and content required")

    await _ensure_post(session, post_id)

    comment = BlogComment(
        postId=post_id,
        name=request.name,
        email=request.email or "anonymous",
        content=request.content,
        avatar=request.avatar,
        isApproved=True,
    )
    session.add(comment)
    await session.commit()
    await session.refresh(comment)

    logger.info(f"Comment {comment.id} added to post {post_id}")
    return comment.model_dump()


async def like_post(session: AsyncSession, post_id: int, count: int, client_ip: str) -> LikeResponse:
    """
    Increment the likes counter by `count` in one UPDATE statement and log a
    like event tagged with the hashed client IP.

    With BLOG_LIKE_UNIQUE_PER_IP the duplicate check runs after the UPDATE.
    The UPDATE holds the post's row lock until commit, so a concurrent like
    from the same IP waits and then sees the committed event.
    """
    ip_hash = hash_ip(client_ip)

    result = await session.execute(
        update(posts)
        .where(posts.c.id == post_id)
        .values(likes=posts.c.likes + count)
        .returning(posts.c.likes)
    )
    likes = result.scalar_one_or_none()
    if likes is None:
        await session.rollback()
        raise _post_not_found()

    if config.BLOG_LIKE_UNIQUE_PER_IP:
        existing = await session.scalar(
            select(BlogLike.id).where(and_(BlogLike.postId == post_id, BlogLike.ipHash == ip_hash)).limit(1)
        )
        if existing is not None:
            await session.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Already liked")

    await session.execute(insert(BlogLike.__table__).values(postId=post_id, ipHash=ip_hash))
    await session.commit()

    return LikeResponse(likes=likes)


async def view_post(session: AsyncSession, post_id: int) -> ViewResponse:
    """Increment the views counter in one UPDATE statement"""
    result = await session.execute(
        update(posts)
        .where(posts.c.id == post_id)
        .values(views=posts.c.views + 1)
        .returning(posts.c.views)
    )
    views = result.scalar_one_or_none()
    if views is None:
        await session.rollback()
        raise _post_not_found()

    await session.commit()
    return ViewResponse(views=views)
