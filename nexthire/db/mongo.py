"""MongoDB connection lifecycle for the Jobs / applications collections."""

import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from nexthire.config import Settings
from nexthire.core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


class MongoDB:
    """
    Process-wide MongoDB handle.

    Created once in the FastAPI lifespan, stored on ``app.state.mongo`` and
    handed to the stores through dependencies. The motor client owns its own
    connection pool; nothing here is per-request.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
        self._initialized = False

    @property
    def is_connected(self) -> bool:
        return self._initialized

    async def initialize(self):
        """Connect, ping and make sure the indexes exist."""
        if self._initialized:
            return

        try:
            self.client = AsyncIOMotorClient(
                self.settings.MONGODB_URI,
                maxPoolSize=self.settings.MONGODB_MAX_POOL_SIZE,
                minPoolSize=self.settings.MONGODB_MIN_POOL_SIZE,
                maxIdleTimeMS=45000,
                serverSelectionTimeoutMS=self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                connectTimeoutMS=10000,
                socketTimeoutMS=20000,
            )
            self.db = self.client[self.settings.MONGODB_DATABASE]

            await self.client.admin.command("ping")
            await self._create_indexes()

            self._initialized = True
            logger.info(f"✅ Connected to MongoDB: {self.settings.MONGODB_DATABASE}")

        except Exception as e:
            logger.error(f"❌ Failed to connect to MongoDB: {e}")
            raise

    async def _create_indexes(self):
        """Create indexes for the query patterns the routes use."""
        try:
            await self.jobs.create_index([("status", 1), ("company", 1)])
            await self.jobs.create_index([("isFeatured", -1), ("createdAt", -1)])
            await self.jobs.create_index("createdAt")
            await self.jobs.create_index("category")
            await self.jobs.create_index("postedBy")
            await self.applications.create_index("applicant_email")
            await self.subscriptions.create_index("email")

            logger.info("✅ MongoDB indexes created")

        except PyMongoError as e:
            logger.warning(f"Index creation error (may already exist): {e}")

    def _collection(self, name: str) -> AsyncIOMotorCollection:
        if self.db is None:
            raise StoreUnavailable(f"{name} collection not available")
        return self.db[name]

    @property
    def jobs(self) -> AsyncIOMotorCollection:
        return self._collection(self.settings.JOBS_COLLECTION)

    @property
    def applications(self) -> AsyncIOMotorCollection:
        return self._collection(self.settings.APPLICATIONS_COLLECTION)

    @property
    def subscriptions(self) -> AsyncIOMotorCollection:
        return self._collection(self.settings.SUBSCRIPTIONS_COLLECTION)

    async def ping(self) -> bool:
        if not self._initialized:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    async def close(self):
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self._initialized = False
            logger.info("MongoDB connection closed")
