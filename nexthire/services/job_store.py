"""Queries against the Jobs collection."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from nexthire.core.exceptions import InternalFailure
from nexthire.schemas.job import ACTIVE_STATUS
from nexthire.utils.helpers import contains_pattern, exact_pattern, paginate_query
from nexthire.utils.validators import to_object_id

logger = logging.getLogger(__name__)

# Fields matched by free-text search
SEARCH_FIELDS = ("title", "company", "category", "location", "description")


class JobStore:
    """
    Job queries used by the routers.

    Every method either returns plain documents or raises InternalFailure;
    lookups that may find nothing return None instead of raising.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def distinct(self, field: str) -> List[Any]:
        """Distinct values of ``field`` across all jobs (categories, locations)."""
        try:
            values = await self.collection.distinct(field)
        except PyMongoError as e:
            logger.error(f"Error fetching distinct {field} values: {e}")
            raise InternalFailure(f"Could not fetch {field} values") from e

        if not isinstance(values, list):
            logger.error(f"Distinct {field} returned {type(values).__name__}, not a list")
            raise InternalFailure(f"Invalid {field} format")
        return values

    async def find_active(self) -> List[Dict]:
        """All active jobs, in store order."""
        return await self._find({"status": ACTIVE_STATUS}, "Failed to fetch companies")

    async def find_active_by_company(self, company_name: str) -> List[Dict]:
        """
        Active jobs whose company equals ``company_name`` ignoring case.

        The name is escaped, so "Acme" matches "ACME" but not "Acme Corp"
        and names containing regex metacharacters match literally.
        """
        query = {"company": exact_pattern(company_name), "status": ACTIVE_STATUS}
        return await self._find(query, "Failed to fetch jobs for company")

    async def search(self, text: str) -> List[Dict]:
        pattern = contains_pattern(text)
        query = {"$or": [{field: pattern} for field in SEARCH_FIELDS]}
        return await self._find(query, "Search failed")

    async def find_by_category(self, category: str) -> List[Dict]:
        return await self._find({"category": category}, "Could not fetch category jobs")

    async def find_by_poster(self, email: str) -> List[Dict]:
        return await self._find({"postedBy": email}, "Failed to fetch jobs")

    async def featured(self, limit: int) -> List[Dict]:
        """Featured jobs first, newest first within each group."""
        try:
            cursor = (
                self.collection.find()
                .sort([("isFeatured", -1), ("createdAt", -1)])
                .limit(limit)
            )
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Error fetching featured jobs: {e}")
            raise InternalFailure("Could not fetch jobs") from e

    async def page(self, page: int, limit: int) -> List[Dict]:
        """One page of jobs, newest first. ``page`` starts at 1."""
        window = paginate_query(page, limit)
        try:
            cursor = (
                self.collection.find()
                .sort("createdAt", -1)
                .skip(window["offset"])
                .limit(window["limit"])
            )
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Error fetching jobs page {page}: {e}")
            raise InternalFailure("Could not fetch jobs") from e

    async def get(self, job_id: ObjectId) -> Optional[Dict]:
        try:
            return await self.collection.find_one({"_id": job_id})
        except PyMongoError as e:
            logger.error(f"Error fetching job {job_id}: {e}")
            raise InternalFailure("Could not fetch job") from e

    async def get_by_reference(self, job_id: Optional[str]) -> Optional[Dict]:
        """
        Resolve a job_id stored on an application.

        Malformed references resolve to None, same as a deleted job.
        """
        object_id = to_object_id(job_id)
        if object_id is None:
            logger.warning(f"Application references malformed job_id {job_id!r}")
            return None
        return await self.get(object_id)

    async def insert(self, job: Dict[str, Any]) -> ObjectId:
        """Insert a job, stamping createdAt. Returns the new _id."""
        document = dict(job)
        document["createdAt"] = datetime.now(timezone.utc)
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Error inserting job: {e}")
            raise InternalFailure("Failed to create job") from e

        logger.info(f"💾 Created job {result.inserted_id}")
        return result.inserted_id

    async def increment_application_count(self, job_id: ObjectId) -> Optional[Dict]:
        """
        Atomically add one to applicationCount.

        Returns the updated job, or None if no job has this id. A missing
        applicationCount field is treated as 0 by $inc.
        """
        try:
            return await self.collection.find_one_and_update(
                {"_id": job_id},
                {"$inc": {"applicationCount": 1}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error incrementing applicationCount for job {job_id}: {e}")
            raise InternalFailure("Failed to process application") from e

    async def decrement_application_count(self, job_id: ObjectId) -> None:
        """Take back an increment whose application could not be saved."""
        try:
            await self.collection.update_one({"_id": job_id}, {"$inc": {"applicationCount": -1}})
        except PyMongoError as e:
            logger.error(f"Error restoring applicationCount for job {job_id}: {e}")
            raise InternalFailure("Failed to process application") from e

    async def _find(self, query: Dict, error_message: str) -> List[Dict]:
        try:
            cursor = self.collection.find(query)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"{error_message}: {e}")
            raise InternalFailure(error_message) from e
