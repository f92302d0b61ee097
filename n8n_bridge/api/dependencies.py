"""Shared API dependencies."""
from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from n8n_bridge.config import Settings
from n8n_bridge.core.exceptions import RequestBodyError
from n8n_bridge.integrations.n8n import N8NClient

JSON_BODY_DOC = {
    "requestBody": {
        "content": {"application/json": {"schema": {"type": "object"}}},
        "required": False,
    }
}


def get_n8n_client(request: Request) -> N8NClient:
    return request.app.state.n8n_client


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_json_body(request: Request) -> Any:
    """Decode a JSON request body for forwarding.

    A missing body or a non-JSON content type yields an empty object.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type != "application/json" and not content_type.endswith("+json"):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise RequestBodyError(f"Invalid JSON body: {exc}") from exc
