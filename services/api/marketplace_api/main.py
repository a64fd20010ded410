"""
Marketplace Search REST API Service - Entry Point

Equipment and manpower search with hierarchical location matching.
"""

import re
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

# Structured logging for Loki aggregation
from observability import (
    LogContext,
    clear_trace_id,
    get_logger,
    record_api_request,
    set_trace_id,
    setup_logging,
)

from config.constants import SERVICE_VERSION
from config.settings import Settings, settings

# Initialize structured logging on module load
setup_logging(service_name="api")
logger = get_logger(__name__)

from locations import LocationMatcher, build_default_registry
from models import build_engine, build_session_factory

from .routers import equipment_search_router, health_router, manpower_search_router

API_VERSION = SERVICE_VERSION

# API description
API_DESCRIPTION = """
REST API for the equipment and manpower marketplace.

## Key Features

- **Equipment Search**: Keyword, location and availability filters over active listings
- **Manpower Search**: Relevance-ranked professional search with categories and featured profiles
- **Location Hierarchy**: "india", "tamil nadu", "madras" and "chennai" all resolve to the right places
"""

# OpenAPI tags
OPENAPI_TAGS = [
    {"name": "equipment-search", "description": "Equipment listing search and statistics"},
    {"name": "manpower-search", "description": "Manpower profile search, categories and featured profiles"},
    {"name": "health", "description": "System health checks"},
]

# Paths excluded from request metrics
UNTRACKED_PATHS = {"/metrics", "/health"}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all API responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


async def request_tracing_middleware(request: Request, call_next):
    """Add trace_id to all requests for logging correlation."""
    trace_id = request.headers.get("X-Trace-ID", str(uuid.uuid4())[:16])
    set_trace_id(trace_id)
    try:
        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        return response
    finally:
        clear_trace_id()


async def metrics_middleware(request: Request, call_next):
    """Track request metrics for Prometheus."""
    if request.url.path in UNTRACKED_PATHS:
        return await call_next(request)

    endpoint = re.sub(r'/\d+', '/{id}', request.url.path)
    start_time = time.time()
    response = await call_next(request)
    record_api_request(request.method, endpoint, response.status_code, time.time() - start_time)
    return response


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Build the API application.

    The database engine, session factory and location matcher are created
    in the lifespan handler and stored on app.state; request handlers reach
    them through dependencies, never through module globals.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {app_settings.PLATFORM_NAME} API v{API_VERSION} ({app_settings.ENVIRONMENT})")
        engine = build_engine(app_settings)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        with LogContext(trace_id="startup"):
            app.state.location_matcher = LocationMatcher(build_default_registry())
        logger.info(f"CORS origins: {cors_origins}")
        try:
            yield
        finally:
            logger.info(f"Shutting down {app_settings.PLATFORM_NAME} API")
            await engine.dispose()

    app = FastAPI(
        title=f"{app_settings.PLATFORM_NAME} API",
        description=API_DESCRIPTION,
        version=API_VERSION,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    # Middleware
    # Trusted hosts for proxy headers (X-Forwarded-For, X-Forwarded-Proto)
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=app_settings.get_trusted_proxy_hosts())
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # CORS configuration
    cors_origins = app_settings.get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(SecurityHeadersMiddleware)
    app.middleware("http")(request_tracing_middleware)
    app.middleware("http")(metrics_middleware)

    # Register routers
    app.include_router(health_router)
    app.include_router(equipment_search_router)
    app.include_router(manpower_search_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for Docker."""
        return {"status": "healthy", "service": "marketplace-search-api", "version": API_VERSION}

    @app.get("/metrics")
    async def metrics():
        """Prometheus metrics endpoint."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": f"{app_settings.PLATFORM_NAME} API",
            "version": API_VERSION,
            "documentation": "/docs",
            "health": "/health",
            "metrics": "/metrics",
        }

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn (console script entry point)."""
    import uvicorn

    uvicorn.run(
        "marketplace_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        proxy_headers=False,
        log_config=None,
    )
