"""
Authentication API router: issues and clears the session cookie
"""
import logging
from datetime import timedelta
from typing import Any

from fastapi import APIRouter, Depends, Response

from restaurant_api.api.deps import TOKEN_COOKIE, get_app_settings
from restaurant_api.core.config import Settings
from restaurant_api.core.security import create_access_token
from restaurant_api.models.common import Message
from restaurant_api.models.user import TokenRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/jwt", response_model=Message)
async def issue_token(
    identity: TokenRequest,
    response: Response,
    settings: Settings = Depends(get_app_settings),
) -> Any:
    """Sign the identity into an httpOnly ``token`` cookie"""
    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token = create_access_token(identity.model_dump(by_alias=True), settings.ACCESS_TOKEN_SECRET, expires)
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=int(expires.total_seconds()),
        httponly=settings.COOKIE_HTTPONLY,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    logger.info("Issued session token")
    return {"success": True}


@router.post("/logout", response_model=Message)
async def logout(response: Response, settings: Settings = Depends(get_app_settings)) -> Any:
    """Clear the session cookie"""
    response.delete_cookie(
        TOKEN_COOKIE,
        httponly=settings.COOKIE_HTTPONLY,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return {"success": True}
