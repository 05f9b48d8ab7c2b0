"""Authentication endpoints (auth cookie)."""

from typing import Any, Dict

import structlog
from fastapi import APIRouter, Body, Request, Response

from nexthire.config import settings
from nexthire.core.security import create_access_token, is_authenticated
from nexthire.schemas.auth import AuthStatusResponse, TokenResponse

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/jwt", response_model=TokenResponse)
async def issue_token(response: Response, claims: Dict[str, Any] = Body(...)):
    """
    Sign the posted user object and set it as an httpOnly cookie.

    The token is also returned in the body.
    """
    token = create_access_token(claims)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    logger.info("token_issued", email=claims.get("email"))
    return TokenResponse(token=token)


@router.get("/check-auth", response_model=AuthStatusResponse)
async def check_auth(request: Request):
    """Whether the request carries a valid, unexpired auth cookie."""
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    return AuthStatusResponse(authenticated=is_authenticated(token))
