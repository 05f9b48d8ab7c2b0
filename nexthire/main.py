"""Main FastAPI application."""

from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from nexthire.api.routes import api_router
from nexthire.config import settings
from nexthire.core.exceptions import APIError, ClientError, InternalFailure, OriginNotAllowed
from nexthire.core.logging import setup_logging
from nexthire.db.mongo import MongoDB

# Setup logging
setup_logging()

logger = structlog.get_logger(__name__)

# Initialize Sentry for error tracking (only if DSN is properly configured)
if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=None,  # Capture all logs
                event_level="ERROR",  # Only send ERROR and above as events
            ),
        ],
        release=settings.APP_VERSION,
        attach_stacktrace=True,
        send_default_pii=False,
    )
else:
    logger.info("sentry_disabled", reason="SENTRY_DSN not configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    mongo = MongoDB(settings)
    await mongo.initialize()
    app.state.mongo = mongo
    logger.info("startup_complete", database=settings.MONGODB_DATABASE)
    yield
    # Shutdown
    await mongo.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Job board API: listings, companies, search and applications",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def reject_disallowed_origins(request: Request, call_next):
    """Refuse cross-origin requests from origins outside the allow-list."""
    origin = request.headers.get("origin")
    if origin and origin not in settings.CORS_ORIGINS:
        logger.warning("origin_blocked", origin=origin, path=request.url.path)
        error = OriginNotAllowed()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())
    return await call_next(request)


# Include API router
app.include_router(api_router)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the NextHire API",
        "version": settings.APP_VERSION,
    }


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """Health check endpoint with database status."""
    mongo = getattr(request.app.state, "mongo", None)
    database_ok = bool(mongo) and await mongo.ping()
    return {
        "status": "healthy" if database_ok else "degraded",
        "environment": settings.ENVIRONMENT,
        "database": "connected" if database_ok else "unavailable",
    }


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed parameters as 400 client errors."""
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    error = ClientError("; ".join(problems) or "Invalid request")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    error = InternalFailure(str(exc) if settings.DEBUG else "An error occurred")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())
