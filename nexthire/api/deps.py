"""
API Dependencies
Hands the process-wide MongoDB handle and the stores built on it to routes.
"""

from fastapi import Depends, Request

from nexthire.core.exceptions import StoreUnavailable
from nexthire.db.mongo import MongoDB
from nexthire.services.application_store import ApplicationStore
from nexthire.services.job_store import JobStore
from nexthire.services.subscription_store import SubscriptionStore


def get_mongo(request: Request) -> MongoDB:
    """
    MongoDB handle opened in the application lifespan.
    """
    mongo = getattr(request.app.state, "mongo", None)
    if mongo is None or not mongo.is_connected:
        raise StoreUnavailable("Database not connected")
    return mongo


def get_job_store(mongo: MongoDB = Depends(get_mongo)) -> JobStore:
    return JobStore(mongo.jobs)


def get_application_store(mongo: MongoDB = Depends(get_mongo)) -> ApplicationStore:
    return ApplicationStore(mongo.applications)


def get_subscription_store(mongo: MongoDB = Depends(get_mongo)) -> SubscriptionStore:
    return SubscriptionStore(mongo.subscriptions)
