"""
Authentication service
Single-admin demo login: the lowest-id user row is "the" admin
"""
import logging
import secrets
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api import config
from portfolio_api.apps.authentication.models import User
from portfolio_api.apps.authentication.schemas import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    UserSummary,
)
from portfolio_api.common.fields import utc_now

logger = logging.getLogger(__name__)

DEMO_TOKEN = "demo-token"


def _invalid_credentials() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")


def _default_admin() -> CurrentUserResponse:
    return CurrentUserResponse(
        id=1, email=config.DEMO_ADMIN_EMAIL, name="Admin", avatar=None, isActive=True
    )


async def _first_user(session: AsyncSession) -> Optional[User]:
    result = await session.execute(select(User).order_by(User.id.asc()).limit(1))
    return result.scalars().first()


async def login(session: AsyncSession, body: Dict[str, Any]) -> LoginResponse:
    """
    Check the demo credential pair first (no database involved), then the
    user table with a plaintext comparison. Every failure, database errors
    included, is reported as invalid credentials.
    """
    try:
        request = LoginRequest.model_validate(body)
    except ValidationError:
        raise _invalid_credentials()

    if request.email == config.DEMO_ADMIN_EMAIL and request.password == config.DEMO_ADMIN_PASSWORD:
        logger.info("Demo admin logged in")
        return LoginResponse(
            token=DEMO_TOKEN,
            user=UserSummary(id=1, email=request.email, name="Admin"),
        )

    if not request.email or not request.password:
        raise _invalid_credentials()

    try:
        result = await session.execute(select(User).where(User.email == request.email))
        user = result.scalars().first()
    except SQLAlchemyError as e:
        logger.error(f"Login DB error: {str(e)}", exc_info=True)
        await session.rollback()
        raise _invalid_credentials()

    if user is None or user.password != request.password:
        logger.warning("Login failed: Invalid credentials")
        raise _invalid_credentials()

    logger.info(f"User logged in successfully, User ID: {user.id}")
    return LoginResponse(
        token=secrets.token_urlsafe(32),
        user=UserSummary(id=user.id, email=user.email, name=user.name),
    )


async def get_current_user(session: AsyncSession) -> CurrentUserResponse:
    """The lowest-id user, or a default admin summary when none can be read"""
    try:
        user = await _first_user(session)
    except SQLAlchemyError as e:
        logger.error(f"Auth me DB error: {str(e)}", exc_info=True)
        await session.rollback()
        return _default_admin()

    if user is None:
        return _default_admin()
    return CurrentUserResponse.model_validate(user)


async def update_current_user(session: AsyncSession, body: Dict[str, Any]) -> CurrentUserResponse:
    """
    Update name, email, avatar and password of the lowest-id user.
    Only string values are applied; avatar may also be cleared with null and
    an empty password is ignored.
    """
    try:
        user = await _first_user(session)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        values: Dict[str, Any] = {"updatedAt": utc_now()}
        for key in ("name", "email"):
            if isinstance(body.get(key), str):
                values[key] = body[key]
        if "avatar" in body and (isinstance(body["avatar"], str) or body["avatar"] is None):
            values["avatar"] = body["avatar"]
        password = body.get("password")
        if isinstance(password, str) and password:
            values["password"] = password

        await session.execute(update(User).where(User.id == user.id).values(**values))
        await session.commit()
        await session.refresh(user)
    except SQLAlchemyError as e:
        logger.error(f"Auth update me DB error: {str(e)}", exc_info=True)
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile"
        )

    logger.info(f"Admin profile updated, User ID: {user.id}")
    return CurrentUserResponse.model_validate(user)
