"""Subscription schemas."""

from typing import Optional

from pydantic import BaseModel


class SubscribeRequest(BaseModel):
    # Optional so a missing email is reported as our 400, not a schema error
    email: Optional[str] = None


class SubscribeResponse(BaseModel):
    message: str
