"""Newsletter subscriptions."""

import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from nexthire.core.exceptions import InternalFailure

logger = logging.getLogger(__name__)


class SubscriptionStore:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def subscribe(self, email: str) -> ObjectId:
        document = {"email": email, "subscribedAt": datetime.now(timezone.utc)}
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Error saving subscription: {e}")
            raise InternalFailure("Failed to subscribe") from e
        return result.inserted_id
