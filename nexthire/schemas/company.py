"""Company schemas for API responses."""

from typing import Any, List, Optional

from pydantic import BaseModel


class CompanySummary(BaseModel):
    """Per-company rollup derived from active jobs."""

    name: Any
    logo: Any
    location: Optional[Any] = None
    jobCount: int = 0
    rating: float
    reviews: int


class CompanyJobsResponse(BaseModel):
    jobs: List[dict]
