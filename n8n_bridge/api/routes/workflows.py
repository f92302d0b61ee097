from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from n8n_bridge.api.dependencies import JSON_BODY_DOC, get_n8n_client, read_json_body
from n8n_bridge.api.responses import error_response, success_envelope
from n8n_bridge.core.exceptions import AppError, IntegrationError
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.schemas.envelope import ErrorEnvelope, SuccessEnvelope

router = APIRouter(responses={500: {"model": ErrorEnvelope}})


@router.get("", response_model=SuccessEnvelope, summary="List all workflows")
async def list_workflows(request: Request, client: N8NClient = Depends(get_n8n_client)):
    try:
        data = await client.list_workflows(params=request.query_params.multi_items())
    except IntegrationError as exc:
        return error_response(exc)
    return success_envelope(data)


@router.post(
    "",
    response_model=SuccessEnvelope,
    summary="Create new workflow",
    openapi_extra=JSON_BODY_DOC,
)
async def create_workflow(request: Request, client: N8NClient = Depends(get_n8n_client)):
    try:
        workflow = await read_json_body(request)
        data = await client.create_workflow(workflow)
    except AppError as exc:
        return error_response(exc)
    return success_envelope(data)


@router.get("/{workflow_id}", response_model=SuccessEnvelope, summary="Get specific workflow")
async def get_workflow(workflow_id: str, client: N8NClient = Depends(get_n8n_client)):
    try:
        data = await client.get_workflow(workflow_id)
    except IntegrationError as exc:
        return error_response(exc)
    return success_envelope(data)


@router.put(
    "/{workflow_id}",
    response_model=SuccessEnvelope,
    summary="Update workflow",
    openapi_extra=JSON_BODY_DOC,
)
async def update_workflow(
    workflow_id: str,
    request: Request,
    client: N8NClient = Depends(get_n8n_client),
):
    try:
        workflow = await read_json_body(request)
        data = await client.update_workflow(workflow_id, workflow)
    except AppError as exc:
        return error_response(exc)
    return success_envelope(data)


@router.post("/{workflow_id}/execute", response_model=SuccessEnvelope, summary="Execute workflow")
async def execute_workflow(workflow_id: str, client: N8NClient = Depends(get_n8n_client)):
    try:
        data = await client.execute_workflow(workflow_id)
    except IntegrationError as exc:
        return error_response(exc)
    return success_envelope(data)
