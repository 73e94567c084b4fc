"""
Admin dashboard statistics
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.apps.blog.models import BlogPost
from portfolio_api.apps.dashboard.schemas import DashboardCounts, DashboardStats, RecentActivity
from portfolio_api.apps.portfolio.models import Message, Project

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


async def _count(session: AsyncSession, model) -> int:
    total = await session.scalar(select(func.count()).select_from(model))
    return int(total or 0)


async def _recent(session: AsyncSession, model):
    result = await session.execute(
        select(model).order_by(model.createdAt.desc(), model.id.desc()).limit(RECENT_LIMIT)
    )
    return [row.model_dump() for row in result.scalars().all()]


async def get_dashboard_stats(session: AsyncSession) -> DashboardStats:
    """Counts of projects, blog posts and messages plus the newest projects and messages"""
    counts = DashboardCounts(
        projects=await _count(session, Project),
        blogs=await _count(session, BlogPost),
        messages=await _count(session, Message),
    )
    recent = RecentActivity(
        projects=await _recent(session, Project),
        messages=await _recent(session, Message),
    )
    logger.debug(f"Dashboard counts: {counts.model_dump()}")
    return DashboardStats(counts=counts, recent=recent)
