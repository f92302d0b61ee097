"""Uniform response envelope for every forwarding route."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from n8n_bridge.schemas.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)


def success_envelope(data: Any) -> dict[str, Any]:
    return {"status": "success", "data": data}


def error_response(exc: Exception) -> JSONResponse:
    """Map any upstream failure to a 500 error envelope.

    The upstream status code is logged but not passed through.
    """
    upstream_status = getattr(exc, "status_code", None)
    logger.warning("n8n request failed (upstream status %s): %s", upstream_status, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorEnvelope(message=str(exc) or type(exc).__name__).model_dump(),
    )
