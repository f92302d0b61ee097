from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from n8n_bridge.api.dependencies import get_n8n_client
from n8n_bridge.api.responses import error_response, success_envelope
from n8n_bridge.core.exceptions import IntegrationError
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.schemas.envelope import ErrorEnvelope, SuccessEnvelope

router = APIRouter()


@router.get(
    "",
    response_model=SuccessEnvelope,
    responses={500: {"model": ErrorEnvelope}},
    summary="List executions",
)
async def list_executions(request: Request, client: N8NClient = Depends(get_n8n_client)):
    try:
        data = await client.list_executions(params=request.query_params.multi_items())
    except IntegrationError as exc:
        return error_response(exc)
    return success_envelope(data)
