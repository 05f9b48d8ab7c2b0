"""Job application schemas."""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ApplicationSubmitResponse(BaseModel):
    insertedId: str
    jobDetails: Dict[str, Any]


class ApplicationDeleteResponse(BaseModel):
    success: bool = True
    deletedCount: int


class ApplicationDocument(BaseModel):
    """Shape of a stored application. Files are kept by name only."""

    job_id: str
    applicant_email: Optional[str] = None
    applicant_name: Optional[str] = None
    applicant_phone: Optional[str] = None
    applicant_linkedin: Optional[str] = None
    applicant_notes: Optional[str] = None
    resume: Optional[str] = None
    coverLetter: Optional[str] = None
