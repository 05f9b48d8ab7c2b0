"""Join job applications with the jobs they point at."""

import asyncio
from typing import Awaitable, Callable, Dict, List, Optional

# Copied from the job onto the application for display
ENRICHED_FIELDS = (
    "title",
    "location",
    "company",
    "company_logo",
    "jobType",
    "category",
    "salaryRange",
)

JobLookup = Callable[[Optional[str]], Awaitable[Optional[Dict]]]


def enrich_application(application: Dict, job: Optional[Dict]) -> Dict:
    """Return a copy of ``application`` carrying the job's display fields."""
    enriched = dict(application)
    if job is None:
        return enriched

    enriched["job"] = job
    for field in ENRICHED_FIELDS:
        enriched[field] = job.get(field)
    return enriched


async def enrich_applications(applications: List[Dict], lookup_job: JobLookup) -> List[Dict]:
    """
    Enrich every application with its job.

    Lookups run concurrently; the result has the same length and order as
    ``applications``. Applications whose job can't be found come back
    without the extra fields.
    """
    jobs = await asyncio.gather(
        *(lookup_job(application.get("job_id")) for application in applications)
    )
    return [
        enrich_application(application, job)
        for application, job in zip(applications, jobs)
    ]
