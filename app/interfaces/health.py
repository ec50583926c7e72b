"""
Liveness endpoint for the Beacon Query API.

Reports the service name and version from settings so probes can
tell deployments apart.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.beacon.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Service health")
def health() -> HealthResponse:
    return HealthResponse(
        status="ok", service=settings.project_name, version=settings.version
    )
