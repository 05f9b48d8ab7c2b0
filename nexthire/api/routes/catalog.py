"""
Catalog endpoints - categories, locations, companies and search.

Mounted under /api.
"""

from typing import Any, List, Optional

import structlog
from fastapi import APIRouter, Depends, Query

from nexthire.api.deps import get_job_store, get_subscription_store
from nexthire.core.exceptions import ClientError, NotFound
from nexthire.schemas.company import CompanyJobsResponse, CompanySummary
from nexthire.schemas.subscription import SubscribeRequest, SubscribeResponse
from nexthire.services.company_aggregator import aggregate_companies
from nexthire.services.job_store import JobStore
from nexthire.services.subscription_store import SubscriptionStore
from nexthire.utils.helpers import serialize_documents
from nexthire.utils.validators import validate_email

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("/categories", response_model=List[Any])
async def list_categories(jobs: JobStore = Depends(get_job_store)):
    """Distinct job categories."""
    categories = await jobs.distinct("category")
    logger.debug("categories_fetched", count=len(categories))
    return categories


@router.get("/locations", response_model=List[Any])
async def list_locations(jobs: JobStore = Depends(get_job_store)):
    """Distinct job locations."""
    return await jobs.distinct("location")


@router.get("/companies", response_model=List[CompanySummary])
@router.get("/companies/all", response_model=List[CompanySummary])
async def list_companies(jobs: JobStore = Depends(get_job_store)):
    """
    Companies with at least one active job, in first-seen order.

    Jobs without a company logo don't count towards any company.
    Rating and reviews are generated per request.
    """
    active_jobs = await jobs.find_active()
    companies = aggregate_companies(active_jobs)
    logger.info("companies_aggregated", jobs=len(active_jobs), companies=len(companies))
    return companies


@router.get("/companies/{company_name}", response_model=CompanyJobsResponse)
async def get_company_jobs(company_name: str, jobs: JobStore = Depends(get_job_store)):
    """Active jobs of one company (case-insensitive exact name match)."""
    company_jobs = await jobs.find_active_by_company(company_name)
    if not company_jobs:
        raise NotFound("No jobs found for this company")
    return {"jobs": serialize_documents(company_jobs)}


@router.get("/search")
async def search_jobs(
    q: Optional[str] = Query(None, description="Text to look for in title, company, category, location or description"),
    jobs: JobStore = Depends(get_job_store),
):
    """
    Case-insensitive substring search. No ranking, results in store order.
    """
    if not q or not q.strip():
        raise ClientError("Missing search query")

    results = await jobs.search(q.strip())
    logger.info("search", query=q, results=len(results))
    return serialize_documents(results)


@router.post("/subscribe", response_model=SubscribeResponse)
async def subscribe(
    request: SubscribeRequest,
    subscriptions: SubscriptionStore = Depends(get_subscription_store),
):
    """Subscribe an email address to job alerts."""
    email = (request.email or "").strip()
    if not email:
        raise ClientError("Email is required")
    if not validate_email(email):
        raise ClientError("Invalid email address")

    await subscriptions.subscribe(email)
    return SubscribeResponse(message="Subscribed successfully")
