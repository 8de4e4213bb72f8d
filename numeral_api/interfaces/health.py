"""
Health check router for the numeral conversion service.

Liveness check for load balancers and container orchestrators.
Reports the service name and version, nothing else.
"""

from fastapi import APIRouter

from numeral_api.core.config import settings
from numeral_api.interfaces.conversion.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns the conversion service name, status and version.",
)
def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok", service=settings.project_name, version=settings.version
    )
