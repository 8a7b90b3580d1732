"""Chronos ASGI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chronos import __version__
from chronos.api.router import api_router
from chronos.config import settings
from chronos.core.database import async_engine
from chronos.core.errors import register_exception_handlers
from chronos.core.logging import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)


configure_logging(settings.log_level, json_logs=settings.is_production)

logger = structlog.get_logger()

DEV_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and release pooled database connections on shutdown."""
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )
    yield
    await async_engine.dispose()
    logger.info("application_shutdown")


def _cors_origins() -> list[str]:
    if settings.cors_origins:
        return settings.cors_origins
    return DEV_CORS_ORIGINS if settings.is_development else []


def create_app() -> FastAPI:
    """Build the Chronos API.

    Feature routers are discovered under ``/api``; ``/health`` stays at the
    root. Interactive docs are served everywhere except production.
    """
    docs_enabled = not settings.is_production
    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant todo and category API",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    # Last added is outermost, so request IDs are bound before logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()
