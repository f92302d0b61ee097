from __future__ import annotations

from fastapi import APIRouter, Depends

from n8n_bridge.api.dependencies import get_app_settings, get_n8n_client
from n8n_bridge.api.responses import error_response
from n8n_bridge.config import Settings
from n8n_bridge.core.exceptions import AppError
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.schemas.envelope import ErrorEnvelope, StatusResponse
from n8n_bridge.services.permission_probe import PermissionProbe

router = APIRouter()


@router.get(
    "/status",
    response_model=StatusResponse,
    responses={500: {"model": ErrorEnvelope}},
    summary="n8n connection status",
)
async def n8n_status(
    client: N8NClient = Depends(get_n8n_client),
    settings: Settings = Depends(get_app_settings),
):
    """Run the permission probe and report which n8n operations the key allows."""
    try:
        permissions = await PermissionProbe(client).run()
    except AppError as exc:
        return error_response(exc)
    return StatusResponse(permissions=permissions, base_url=settings.n8n_base_url)
