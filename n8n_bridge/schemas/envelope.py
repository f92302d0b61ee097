from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from n8n_bridge.schemas.permissions import PermissionReport


class SuccessEnvelope(BaseModel):
    status: Literal["success"] = "success"
    data: Any = None


class ErrorEnvelope(BaseModel):
    status: Literal["error"] = "error"
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str


class StatusResponse(BaseModel):
    status: Literal["success"] = "success"
    permissions: PermissionReport
    base_url: str = Field(serialization_alias="baseUrl")
