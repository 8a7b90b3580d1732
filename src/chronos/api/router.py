"""Root API router with health endpoint and module mounting."""

from datetime import UTC, datetime

from fastapi import APIRouter

from chronos.api.schemas import HealthResponse
from chronos.modules import discover_modules


# Create root API router
api_router = APIRouter()

# Health check endpoint (no /api prefix)
health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns 200 while the process is able to serve requests.",
)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC).isoformat(),
    )


# Feature routes live under /api
feature_router = APIRouter(prefix="/api")

# Mount discovered module routers
for module_router in discover_modules():
    feature_router.include_router(module_router)

# Include routers in main api_router
api_router.include_router(health_router)
api_router.include_router(feature_router)
