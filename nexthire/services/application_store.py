"""Queries against the job_applications collection."""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from nexthire.core.exceptions import InternalFailure

logger = logging.getLogger(__name__)


class ApplicationStore:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_by_applicant(self, email: str) -> List[Dict]:
        try:
            cursor = self.collection.find({"applicant_email": email})
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error fetching applications for {email}: {e}")
            raise InternalFailure("Failed to load applications") from e

    async def insert(self, application: Dict[str, Any]) -> ObjectId:
        try:
            result = await self.collection.insert_one(dict(application))
        except PyMongoError as e:
            logger.error(f"Error saving application: {e}")
            raise InternalFailure("Failed to process application") from e

        logger.info(
            f"💾 Saved application {result.inserted_id} for job {application.get('job_id')}"
        )
        return result.inserted_id

    async def delete(self, application_id: ObjectId) -> int:
        """Delete one application. Returns the number of deleted documents."""
        try:
            result = await self.collection.delete_one({"_id": application_id})
        except PyMongoError as e:
            logger.error(f"Error deleting application {application_id}: {e}")
            raise InternalFailure("Failed to delete application") from e

        if result.deleted_count:
            logger.info(f"🗑️  Deleted application {application_id}")
        return result.deleted_count
