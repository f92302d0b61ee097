"""
Health API Routes
"""
from fastapi import APIRouter

from n8n_bridge.schemas.envelope import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> HealthResponse:
    """Local liveness check; never calls n8n."""
    return HealthResponse(status="ok", message="n8n AI Bridge is running")
