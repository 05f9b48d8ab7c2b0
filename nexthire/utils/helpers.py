"""Helper utilities."""

import re
from typing import Any, Dict, List

from bson import ObjectId


def serialize_document(value: Any) -> Any:
    """Recursively convert ObjectIds in a Mongo document to hex strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value


def serialize_documents(documents: List[Dict]) -> List[Dict]:
    return [serialize_document(doc) for doc in documents]


def contains_pattern(text: str) -> Dict[str, str]:
    """Case-insensitive literal substring match."""
    return {"$regex": re.escape(text), "$options": "i"}


def exact_pattern(text: str) -> Dict[str, str]:
    """Case-insensitive full-string match."""
    return {"$regex": f"\\A{re.escape(text)}\\z", "$options": "i"}


def paginate_query(page: int = 1, page_size: int = 20) -> Dict:
    """Helper for pagination."""
    offset = (page - 1) * page_size
    return {
        "offset": offset,
        "limit": page_size,
        "page": page,
        "page_size": page_size,
    }
