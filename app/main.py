"""FastAPI application entry point.

``create_app`` takes the (immutable) settings explicitly and configures CORS,
structured logging, the error-to-response mapping and router registration.
The front-end fallback router is registered last so it only sees paths no
API route claimed.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.routers import candidates, frontend, health, portal

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    settings: Settings = application.state.settings
    logger.info(
        "Application starting up",
        extra={"port": settings.PORT, "candidates_table": settings.CANDIDATES_TABLE},
    )
    yield
    logger.info("Application shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around *settings* (defaults to the environment)."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title="Candidate Registry API",
        description="Backend for registering and managing candidates",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.settings = settings

    # -----------------------------------------------------------------------
    # CORS Configuration
    # -----------------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=Settings.split_list(settings.ALLOWED_ORIGINS),
        allow_credentials=False,
        allow_methods=Settings.split_list(settings.ALLOWED_METHODS),
        allow_headers=Settings.split_list(settings.ALLOWED_HEADERS),
    )

    register_exception_handlers(application)

    # -----------------------------------------------------------------------
    # Router Registration
    # -----------------------------------------------------------------------
    application.include_router(health.router, tags=["Health"])
    application.include_router(portal.router, tags=["Portal"])
    application.include_router(candidates.router, prefix="/candidates", tags=["Candidates"])
    application.include_router(frontend.router)

    return application


app = create_app()
