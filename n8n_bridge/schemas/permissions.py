from __future__ import annotations

from pydantic import BaseModel, Field


class ReadPermission(BaseModel):
    read: bool = False


class WorkflowPermissions(BaseModel):
    read: bool = False
    write: bool = False


class PermissionReport(BaseModel):
    """Which n8n API operations the configured key was able to perform."""

    connection: bool = False
    workflows: WorkflowPermissions = Field(default_factory=WorkflowPermissions)
    executions: ReadPermission = Field(default_factory=ReadPermission)
    credentials: ReadPermission = Field(default_factory=ReadPermission)
    users: ReadPermission = Field(default_factory=ReadPermission)
