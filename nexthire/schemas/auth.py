"""Authentication schemas."""

from pydantic import BaseModel


class TokenResponse(BaseModel):
    """Token response schema."""

    success: bool = True
    token: str


class AuthStatusResponse(BaseModel):
    authenticated: bool
