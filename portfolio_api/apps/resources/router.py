"""
Catch-all API router
Every /api/... (or bare /...) request is resolved to a resource and dispatched here
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, Optional
import logging

from portfolio_api import config
from portfolio_api.apps.ai.schemas import AIContentResponse, AnalyzeGithubRequest, GenerateRequest
from portfolio_api.apps.ai.service import AIServiceError, get_ai_service
from portfolio_api.apps.authentication import service as auth_service
from portfolio_api.apps.blog import service as blog_service
from portfolio_api.apps.dashboard.service import get_dashboard_stats
from portfolio_api.apps.media.service import placeholder_upload
from portfolio_api.apps.mock.service import mock_response
from portfolio_api.apps.resources.payload import PayloadError
from portfolio_api.apps.resources.registry import ResourceKind, ResourceSpec, lookup
from portfolio_api.apps.resources.resolver import ResolvedRoute, resolve_route
from portfolio_api.apps.resources.service import ResourceService
from portfolio_api.common.fields import utc_now
from portfolio_api.dependencies import get_client_ip, get_db, read_json_body

logger = logging.getLogger(__name__)

router = APIRouter()

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]
BLOG_ACTIONS = frozenset({"comments", "like", "view"})


def respond(content: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    content: Dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def method_not_allowed() -> HTTPException:
    return HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail="Method not allowed")


@router.api_route("/{path:path}", methods=METHODS)
async def dispatch(request: Request, path: str, session: AsyncSession = Depends(get_db)):
    """Resolve the request and hand it to the special-case or generic handler"""
    route = resolve_route(path, request.query_params)
    request.state.route = route
    method = request.method
    logger.debug(f"{method} /{path} -> {route}")

    if config.MOCK_DB:
        body = await read_json_body(request) if method in ("POST", "PUT", "PATCH") else {}
        mocked = mock_response(route, method, body)
        if mocked is not None:
            status_code, content = mocked
            return respond(content, status_code)

    if route.resource == ResourceKind.BLOG_POSTS.value:
        if route.action == "by_slug":
            return respond(await blog_service.get_by_slug(session, request.query_params.get("slug")))
        if route.id is not None and route.action in BLOG_ACTIONS:
            handled = await _blog_interaction(request, session, route)
            if handled is not None:
                return handled

    if route.resource == ResourceKind.PROJECTS.value and route.id is not None and route.sub_resource == "summaries":
        return respond({"success": True, "message": "Summary created (mock)"})

    if route.resource == "auth":
        return await _auth(request, session, route)

    if route.resource == "admin" and route.action == "dashboard-stats":
        if method != "GET":
            raise method_not_allowed()
        stats = await get_dashboard_stats(session)
        return respond(stats.model_dump())

    if route.resource == "upload":
        return respond(placeholder_upload())

    if route.resource == "ai":
        return await _ai(request, route)

    if route.resource == "health":
        return respond({"status": "ok", "timestamp": utc_now()})

    spec = lookup(route.resource)
    if spec is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Resource '{route.resource}' not found"
        )

    return await _generic(request, session, spec, route)


async def _blog_interaction(request: Request, session: AsyncSession, route: ResolvedRoute) -> Optional[JSONResponse]:
    method = request.method

    if route.action == "comments":
        if method == "GET":
            return respond(await blog_service.list_comments(session, route.id))
        if method == "POST":
            body = await read_json_body(request)
            comment = await blog_service.add_comment(session, route.id, body)
            return respond(comment, status.HTTP_201_CREATED)
        # Other methods act on the post itself
        return None

    if method != "POST":
        raise method_not_allowed()

    if route.action == "like":
        body = await read_json_body(request)
        result = await blog_service.like_post(
            session, route.id, blog_service.parse_like_count(body), get_client_ip(request)
        )
        return respond(result.model_dump())

    result = await blog_service.view_post(session, route.id)
    return respond(result.model_dump())


async def _auth(request: Request, session: AsyncSession, route: ResolvedRoute) -> JSONResponse:
    method = request.method

    if route.action == "login":
        if method != "POST":
            raise method_not_allowed()
        result = await auth_service.login(session, await read_json_body(request))
        return respond(result.model_dump())

    if route.action == "me":
        if method == "GET":
            user = await auth_service.get_current_user(session)
            return respond(user.model_dump())
        if method in ("PUT", "PATCH"):
            user = await auth_service.update_current_user(session, await read_json_body(request))
            return respond(user.model_dump())
        raise method_not_allowed()

    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource 'auth' not found")


async def _ai(request: Request, route: ResolvedRoute) -> JSONResponse:
    if request.method != "POST":
        raise method_not_allowed()

    if route.action == "generate":
        body = GenerateRequest.model_validate(_string_fields(await read_json_body(request), ("prompt", "systemPrompt")))
        if not body.prompt:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required")
        try:
            content = await get_ai_service().generate(body.prompt, body.systemPrompt)
        except AIServiceError as e:
            logger.error(f"AI generate failed: {str(e)}", exc_info=True)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "AI Handler Failed", str(e))
        return respond(AIContentResponse(content=content, result=content).model_dump())

    if route.action == "analyze-github":
        body = AnalyzeGithubRequest.model_validate(_string_fields(await read_json_body(request), ("url",)))
        if not body.url:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="URL is required")
        try:
            content = await get_ai_service().analyze_github(body.url)
        except AIServiceError as e:
            logger.error(f"AI GitHub analysis failed: {str(e)}", exc_info=True)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "AI Analysis Failed", str(e))
        return respond(AIContentResponse(content=content, result=content).model_dump())

    return respond({"result": "AI endpoint ready."})


def _string_fields(body: Dict[str, Any], keys) -> Dict[str, Any]:
    """Only the given keys, and only when they hold strings"""
    return {key: body[key] for key in keys if isinstance(body.get(key), str)}


async def _generic(request: Request, session: AsyncSession, spec: ResourceSpec, route: ResolvedRoute) -> JSONResponse:
    method = request.method
    service = ResourceService(session)

    if route.is_bulk:
        if method != "DELETE":
            raise method_not_allowed()
        body = await read_json_body(request)
        ids = body.get("ids")
        if not isinstance(ids, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid bulk delete request")
        return respond(await service.bulk_delete(spec, ids))

    if method == "GET":
        if route.id is not None:
            return respond(await service.get_one(spec, route.id))
        if spec.singleton:
            return respond(await service.get_singleton(spec))
        params = request.query_params
        return respond(await service.list_items(
            spec, page=params.get("page"), limit=params.get("limit"), search=params.get("search")
        ))

    if method == "POST":
        body = await read_json_body(request)
        try:
            status_code, row = await service.create(spec, body)
        except PayloadError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return respond(row, status_code)

    if method in ("PUT", "PATCH"):
        if route.id is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID required for update")
        body = await read_json_body(request)
        try:
            row = await service.update(spec, route.id, body)
        except PayloadError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return respond(row)

    if method == "DELETE":
        if route.id is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID required for delete")
        return respond(await service.delete(spec, route.id))

    raise method_not_allowed()
