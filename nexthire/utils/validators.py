"""Validators."""

import re
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId

from nexthire.core.exceptions import ClientError


def validate_email(email: str) -> bool:
    """Validate email format."""
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email))


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Convert a hex string to an ObjectId, or None if it isn't one."""
    if isinstance(value, ObjectId):
        return value
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def parse_object_id(value: str, what: str = "id") -> ObjectId:
    """Like ``to_object_id`` but raises a ClientError for malformed ids."""
    object_id = to_object_id(value)
    if object_id is None:
        raise ClientError(f"Invalid {what}: {value!r}")
    return object_id
