"""Job schemas for API requests and responses."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

ACTIVE_STATUS = "active"


class JobCreate(BaseModel):
    """
    Job posted by an employer.

    Unknown fields are kept so the frontend can add display data without a
    server change. ``createdAt`` and ``applicationCount`` are server-owned.
    """

    model_config = ConfigDict(extra="allow")

    title: str = Field(..., min_length=1)
    company: Optional[str] = None
    company_logo: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    jobType: Optional[str] = None
    salaryRange: Optional[Any] = None
    postedBy: Optional[str] = None
    status: str = ACTIVE_STATUS
    isFeatured: bool = False

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump()
        document.pop("_id", None)
        document.pop("createdAt", None)
        document["applicationCount"] = 0
        return document


class JobCreatedResponse(BaseModel):
    acknowledged: bool = True
    insertedId: str
