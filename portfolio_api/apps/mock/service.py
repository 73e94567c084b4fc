"""
Mock mode (MOCK_DB=true)
Synthetic responses for frontend work without a database
"""
import time
from typing import Any, Dict, Optional, Tuple

from fastapi import status

from portfolio_api.apps.dashboard.schemas import DashboardCounts, DashboardStats, RecentActivity
from portfolio_api.apps.resources.resolver import ResolvedRoute
from portfolio_api.common.fields import utc_now

MOCK_TOKEN = "mock-jwt-token"
MOCK_EMAIL = "mock@example.com"
PASSTHROUGH_RESOURCES = frozenset({"health", "upload", "ai"})


def _mock_user(email: Optional[str] = None) -> Dict[str, Any]:
    return {"id": 999, "email": email or MOCK_EMAIL, "name": "Mock User", "role": "admin"}


def _mock_item(item_id: int, title: str) -> Dict[str, Any]:
    return {"id": item_id, "title": title, "name": title, "createdAt": utc_now()}


def mock_response(route: ResolvedRoute, method: str, body: Dict[str, Any]) -> Optional[Tuple[int, Any]]:
    """
    (status_code, content) for the request, or None when the route is
    served by the real handlers (health, upload, ai).
    """
    if route.resource == "auth":
        if route.action == "login":
            email = body.get("email") if isinstance(body.get("email"), str) else None
            return status.HTTP_200_OK, {"token": MOCK_TOKEN, "user": _mock_user(email)}
        if route.action == "me":
            return status.HTTP_200_OK, _mock_user()

    if route.resource == "admin" and route.action == "dashboard-stats":
        stats = DashboardStats(
            counts=DashboardCounts(projects=10, blogs=5, messages=3),
            recent=RecentActivity(),
        )
        return status.HTTP_200_OK, stats.model_dump()

    if route.resource in PASSTHROUGH_RESOURCES:
        return None

    if method == "POST":
        return status.HTTP_201_CREATED, {
            **body,
            "id": int(time.time() * 1000),
            "createdAt": utc_now(),
        }
    if method in ("PUT", "PATCH"):
        return status.HTTP_200_OK, {**body, "id": route.id or 1, "updatedAt": utc_now()}
    if method == "DELETE":
        return status.HTTP_200_OK, {"success": True}
    if method == "GET":
        if route.id is not None:
            return status.HTTP_200_OK, _mock_item(route.id, "Mock Item")
        return status.HTTP_200_OK, [_mock_item(1, "Mock Item 1")]
    return None
