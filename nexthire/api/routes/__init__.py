"""API routes."""

from fastapi import APIRouter

from nexthire.api.routes import applications, auth, catalog, jobs

api_router = APIRouter()

# Include all route modules
api_router.include_router(catalog.router, prefix="/api", tags=["Catalog"])
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(applications.router, prefix="/job-applications", tags=["Applications"])
