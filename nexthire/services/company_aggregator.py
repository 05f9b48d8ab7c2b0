"""
Company aggregation.

Folds the active job set into one summary per company. Rating and review
numbers are synthesized (there is no review data yet), so they are only
stable within one aggregation pass.

Jobs without a company name or a company_logo are left out of the
summaries entirely. That is the policy of the companies listing: a company
card without a logo is not shown.
"""

import random
from typing import Dict, Iterable, List, Optional

from nexthire.schemas.company import CompanySummary
from nexthire.schemas.job import ACTIVE_STATUS

RATING_MIN = 3.5
RATING_MAX = 5.0
REVIEWS_MIN = 20
REVIEWS_MAX = 220  # exclusive


def aggregate_companies(
    jobs: Iterable[Dict],
    rng: Optional[random.Random] = None,
) -> List[CompanySummary]:
    """
    Build company summaries in first-occurrence order.

    The first job seen for a company decides its logo, location, rating and
    reviews; later jobs only bump ``jobCount``.
    """
    rng = rng or random.Random()
    companies: Dict[str, CompanySummary] = {}

    for job in jobs:
        if job.get("status") != ACTIVE_STATUS:
            continue

        name = job.get("company")
        logo = job.get("company_logo")
        if not name or not logo:
            continue

        summary = companies.get(name)
        if summary is None:
            companies[name] = CompanySummary(
                name=name,
                logo=logo,
                location=job.get("location"),
                jobCount=1,
                rating=round(rng.uniform(RATING_MIN, RATING_MAX), 1),
                reviews=rng.randrange(REVIEWS_MIN, REVIEWS_MAX),
            )
        else:
            summary.jobCount += 1

    return list(companies.values())
