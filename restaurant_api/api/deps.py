"""
Request dependencies: settings, auth gate and ownership check
"""
import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Cookie, Depends, HTTPException, Request, status

from restaurant_api.core.config import Settings
from restaurant_api.core.security import verify_token

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "token"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_user(
    request: Request,
    token: Optional[str] = Cookie(None),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """Verify the session cookie and return its claims"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized access",
    )
    if not token:
        logger.warning(f"Rejected {request.url.path}: no token cookie")
        raise credentials_exception

    result = verify_token(token, settings.ACCESS_TOKEN_SECRET)
    if not result.ok:
        logger.warning(f"Rejected {request.url.path}: token {result.error.value}")
        raise credentials_exception

    request.state.user = result.claims
    return result.claims


def ensure_owner(claims: Dict[str, Any], email: Optional[str]) -> None:
    """The authenticated email must equal the requested one exactly"""
    if email is None or claims.get("email") != email:
        logger.warning("Forbidden: token email does not match requested email")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden access")


def parse_object_id(id: str) -> ObjectId:
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")
