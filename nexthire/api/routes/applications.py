"""Job application endpoints - submit, list and withdraw applications."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from nexthire.api.deps import get_application_store, get_job_store
from nexthire.config import settings
from nexthire.core.exceptions import ClientError, InternalFailure, NotFound, PayloadTooLarge
from nexthire.schemas.application import (
    ApplicationDeleteResponse,
    ApplicationDocument,
    ApplicationSubmitResponse,
)
from nexthire.services.application_enricher import enrich_applications
from nexthire.services.application_store import ApplicationStore
from nexthire.services.job_store import JobStore
from nexthire.utils.helpers import serialize_document, serialize_documents
from nexthire.utils.validators import parse_object_id

logger = structlog.get_logger(__name__)
router = APIRouter()

UPLOAD_CHUNK_SIZE = 64 * 1024


async def _upload_size(upload: Optional[UploadFile]) -> int:
    """Drain an uploaded file and return its size. Contents are not kept."""
    if upload is None:
        return 0
    size = 0
    while True:
        chunk = await upload.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
    return size


def _filename(upload: Optional[UploadFile]) -> Optional[str]:
    if upload is None:
        return None
    return upload.filename or None


@router.get("")
async def list_applications(
    email: Optional[str] = Query(None, description="Applicant email"),
    applications: ApplicationStore = Depends(get_application_store),
    jobs: JobStore = Depends(get_job_store),
):
    """
    Applications of one applicant, each with its job attached.

    Applications whose job no longer exists are returned as stored.
    """
    if not email:
        raise ClientError("Missing email")

    records = await applications.find_by_applicant(email)
    enriched = await enrich_applications(records, jobs.get_by_reference)
    return serialize_documents(enriched)


@router.post("", response_model=ApplicationSubmitResponse)
async def submit_application(
    job_id: Optional[str] = Form(None),
    applicant_email: Optional[str] = Form(None),
    applicant_name: Optional[str] = Form(None),
    applicant_phone: Optional[str] = Form(None),
    applicant_linkedin: Optional[str] = Form(None),
    applicant_notes: Optional[str] = Form(None),
    resume: Optional[UploadFile] = File(None),
    coverLetter: Optional[UploadFile] = File(None),
    applications: ApplicationStore = Depends(get_application_store),
    jobs: JobStore = Depends(get_job_store),
):
    """
    Apply to a job.

    Only the original file names of the resume and cover letter are stored.
    The job's applicationCount goes up by one; applying to a job that
    doesn't exist is a 404 and nothing is saved. If the application
    can't be stored the increment is taken back.
    """
    if not job_id:
        raise ClientError("job_id is required")
    job_object_id = parse_object_id(job_id, "job_id")

    upload_size = await _upload_size(resume) + await _upload_size(coverLetter)
    if upload_size > settings.MAX_UPLOAD_SIZE:
        raise PayloadTooLarge(
            f"Resume and cover letter exceed {settings.MAX_UPLOAD_SIZE} bytes",
            limit=settings.MAX_UPLOAD_SIZE,
        )

    job = await jobs.increment_application_count(job_object_id)
    if job is None:
        raise NotFound("Job not found")

    application = ApplicationDocument(
        job_id=job_id,
        applicant_email=applicant_email,
        applicant_name=applicant_name,
        applicant_phone=applicant_phone,
        applicant_linkedin=applicant_linkedin,
        applicant_notes=applicant_notes,
        resume=_filename(resume),
        coverLetter=_filename(coverLetter),
    )
    try:
        inserted_id = await applications.insert(application.model_dump())
    except InternalFailure:
        logger.warning("application_insert_failed", job_id=job_id)
        await jobs.decrement_application_count(job_object_id)
        raise

    logger.info(
        "application_submitted",
        application_id=str(inserted_id),
        job_id=job_id,
        application_count=job.get("applicationCount"),
    )
    return ApplicationSubmitResponse(
        insertedId=str(inserted_id),
        jobDetails=serialize_document(job),
    )


@router.delete("/{application_id}", response_model=ApplicationDeleteResponse)
async def delete_application(
    application_id: str,
    applications: ApplicationStore = Depends(get_application_store),
):
    deleted_count = await applications.delete(parse_object_id(application_id, "application id"))
    if deleted_count == 0:
        raise NotFound("Application not found", deletedCount=0)
    return ApplicationDeleteResponse(deletedCount=deleted_count)
