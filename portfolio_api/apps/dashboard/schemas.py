"""
Pydantic schemas for the admin dashboard
"""
from pydantic import BaseModel
from typing import Any, Dict, List


class DashboardCounts(BaseModel):
    projects: int = 0
    blogs: int = 0
    messages: int = 0


class RecentActivity(BaseModel):
    projects: List[Dict[str, Any]] = []
    messages: List[Dict[str, Any]] = []


class DashboardStats(BaseModel):
    """Response schema for admin/dashboard-stats"""
    counts: DashboardCounts
    recent: RecentActivity
