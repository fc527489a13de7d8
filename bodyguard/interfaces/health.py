"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, service name and version.
"""

from fastapi import APIRouter

from bodyguard.core.config import settings
from bodyguard.interfaces.payloads.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns service name, health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok", service=settings.project_name, version=settings.version
    )
