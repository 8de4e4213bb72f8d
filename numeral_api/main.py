"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (documentation, health, conversion)
- Error handlers (centralized domain-to-HTTP mapping)
- Middleware (CORS, request logging, security headers)
- Rate limiting (slowapi limiter shared with the conversion routes)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from numeral_api.core.config import settings
from numeral_api.interfaces.conversion.router import router as conversion_router
from numeral_api.interfaces.docs import AVAILABLE_ENDPOINTS
from numeral_api.interfaces.docs import router as docs_router
from numeral_api.interfaces.health import router as health_router
from numeral_api.shared.errors.handlers import register_error_handlers
from numeral_api.shared.logging import configure_logging
from numeral_api.shared.request_logging import RequestLoggingMiddleware
from numeral_api.shared.security.headers import SecurityHeadersMiddleware
from numeral_api.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: announce the served endpoints."""
    logger.info("%s v%s started", settings.project_name, settings.version)
    for path in AVAILABLE_ENDPOINTS:
        logger.info("Serving %s", path)

    yield

    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Outermost, so preflight requests and error responses get CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # --- Error Handlers ---
    register_error_handlers(app, available_endpoints=AVAILABLE_ENDPOINTS)

    # --- Routers ---
    app.include_router(docs_router)
    app.include_router(health_router, prefix="/api")
    app.include_router(conversion_router)

    return app


app = create_app()
