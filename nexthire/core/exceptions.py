"""API error types and their HTTP mapping."""

from typing import Any, Dict, Optional

from fastapi import status


class APIError(Exception):
    """
    Base class for errors that are turned into JSON responses.

    Every error carries a stable machine-readable ``code`` next to the
    human-readable ``message`` so clients don't have to match on text.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_failure"
    default_message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.code, "message": self.message}
        body.update(self.extra)
        return body


class ClientError(APIError):
    """Missing or invalid request parameters."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "client_error"
    default_message = "Invalid request"


class OriginNotAllowed(APIError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "origin_not_allowed"
    default_message = "Not allowed by CORS"


class NotFound(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Resource not found"


class PayloadTooLarge(APIError):
    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    code = "payload_too_large"
    default_message = "Uploaded files are too large"


class StoreUnavailable(APIError):
    """The document store has not been connected (yet)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "store_unavailable"
    default_message = "Database not available"


class InternalFailure(APIError):
    """Unexpected store or query error."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "internal_failure"
    default_message = "Internal server error"
