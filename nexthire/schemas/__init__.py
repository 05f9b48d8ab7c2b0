"""Request and response schemas."""

from nexthire.schemas.application import (
    ApplicationDeleteResponse,
    ApplicationDocument,
    ApplicationSubmitResponse,
)
from nexthire.schemas.auth import AuthStatusResponse, TokenResponse
from nexthire.schemas.company import CompanyJobsResponse, CompanySummary
from nexthire.schemas.job import JobCreate, JobCreatedResponse
from nexthire.schemas.subscription import SubscribeRequest, SubscribeResponse

__all__ = [
    "ApplicationDeleteResponse",
    "ApplicationDocument",
    "ApplicationSubmitResponse",
    "AuthStatusResponse",
    "TokenResponse",
    "CompanyJobsResponse",
    "CompanySummary",
    "JobCreate",
    "JobCreatedResponse",
    "SubscribeRequest",
    "SubscribeResponse",
]
