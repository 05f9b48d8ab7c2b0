"""Job endpoints - browse, look up and post jobs."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, status

from nexthire.api.deps import get_job_store
from nexthire.config import settings
from nexthire.core.exceptions import ClientError, NotFound
from nexthire.schemas.job import JobCreate, JobCreatedResponse
from nexthire.services.job_store import JobStore
from nexthire.utils.helpers import serialize_document, serialize_documents
from nexthire.utils.validators import parse_object_id

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("/featured")
async def featured_jobs(jobs: JobStore = Depends(get_job_store)):
    """Featured jobs first, then newest."""
    return serialize_documents(await jobs.featured(settings.FEATURED_JOBS_LIMIT))


@router.get("/all")
async def list_jobs(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Items per page",
    ),
    jobs: JobStore = Depends(get_job_store),
):
    """
    Paginated job list, newest first.

    **Pagination:**
    - `page`: Page number (starts at 1)
    - `limit`: Items per page (max: 100)
    """
    return serialize_documents(await jobs.page(page, limit))


@router.get("/category/{category}")
async def jobs_in_category(category: str, jobs: JobStore = Depends(get_job_store)):
    return serialize_documents(await jobs.find_by_category(category))


@router.get("/{job_id}")
async def get_job(job_id: str, jobs: JobStore = Depends(get_job_store)):
    job = await jobs.get(parse_object_id(job_id, "job id"))
    if job is None:
        raise NotFound("Job not found")
    return serialize_document(job)


@router.get("")
async def jobs_posted_by(
    email: Optional[str] = Query(None, description="Email of the poster"),
    jobs: JobStore = Depends(get_job_store),
):
    """Jobs posted by one employer."""
    if not email:
        raise ClientError("Missing email")
    return serialize_documents(await jobs.find_by_poster(email))


@router.post("", response_model=JobCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_job(job_in: JobCreate, jobs: JobStore = Depends(get_job_store)):
    """Post a new job. createdAt is set by the server."""
    inserted_id = await jobs.insert(job_in.to_document())
    logger.info("job_created", job_id=str(inserted_id), posted_by=job_in.postedBy)
    return JobCreatedResponse(insertedId=str(inserted_id))
