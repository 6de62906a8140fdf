#!/usr/bin/env python3
"""
Camp Registration API - HTTP API layer for the camp registration system.

This is the FastAPI application behind the registration form and the admin
dashboard. It provides:
- AI scoring of applicants
- One-time WhatsApp approval notifications
- Registration submission and admin management
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campreg.logging_config import configure_logging, get_logger

from .dependencies import authenticate_service_pb
from .errors import register_exception_handlers
from .settings import get_settings

# Configure unified logging format
# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()

    # Startup
    if settings.skip_pb_auth:
        logger.warning("Skipping PocketBase authentication (SKIP_PB_AUTH=true)")
    elif not settings.pocketbase_admin_password:
        logger.warning("POCKETBASE_ADMIN_PASSWORD not set; public submissions will use an anonymous client")
    else:
        await authenticate_service_pb(settings)

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Camp Registration API",
        description="Applicant scoring, approval notifications and registration management",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Load settings
    settings = get_settings()

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    # Register routers
    from .routers import notifications, registrations, scoring

    app.include_router(scoring.router)
    app.include_router(notifications.router)
    app.include_router(registrations.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "campreg-api"}

    return app


# Create app instance for uvicorn
app = create_app()
