"""
Permission probe: empirically determine what the configured n8n API key may do.

Every check is a real call against the n8n API. Checks run one after another and
each is best-effort: a failed check only clears its own flag.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from n8n_bridge.core.exceptions import IntegrationError
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.schemas.permissions import PermissionReport

logger = logging.getLogger(__name__)

PROBE_WORKFLOW_NAME = "AI-Bridge-Test-Workflow"


def probe_workflow() -> dict[str, Any]:
    """Smallest workflow definition n8n accepts: one no-op start node."""
    return {
        "name": PROBE_WORKFLOW_NAME,
        "nodes": [
            {
                "parameters": {},
                "name": "Start",
                "type": "n8n-nodes-base.start",
                "typeVersion": 1,
                "position": [240, 300],
            }
        ],
        "connections": {},
        "settings": {},
    }


@dataclass(frozen=True)
class StepResult:
    ok: bool
    data: Any = None
    error: str | None = None


class PermissionProbe:
    """Runs the read/write checks against n8n and aggregates a PermissionReport."""

    def __init__(self, client: N8NClient):
        self.client = client

    async def _attempt(self, call: Callable[[], Awaitable[Any]]) -> StepResult:
        try:
            return StepResult(ok=True, data=await call())
        except IntegrationError as exc:
            return StepResult(ok=False, error=str(exc))

    async def run(self) -> PermissionReport:
        logger.info("Testing n8n connection...")
        report = PermissionReport()

        baseline = await self._attempt(self.client.list_workflows)
        if baseline.ok:
            report.connection = True
            report.workflows.read = True
            logger.info("n8n connection successful")
        else:
            logger.warning("n8n connection failed: %s", baseline.error)
            logger.warning("Please check your N8N_API token and N8N_BASE_URL")

        # Same call as the baseline; kept so the report mirrors each listed check.
        workflows_read = await self._attempt(self.client.list_workflows)
        report.workflows.read = workflows_read.ok
        self._log_check("Workflows READ", workflows_read)

        report.workflows.write = await self._check_workflow_write()

        executions_read = await self._attempt(self.client.list_executions)
        report.executions.read = executions_read.ok
        self._log_check("Executions READ", executions_read)

        credentials_read = await self._attempt(self.client.list_credentials)
        report.credentials.read = credentials_read.ok
        self._log_check("Credentials READ", credentials_read)

        # /users is missing from some n8n versions.
        users_read = await self._attempt(self.client.list_users)
        report.users.read = users_read.ok
        self._log_check("Users READ", users_read)

        return report

    async def _check_workflow_write(self) -> bool:
        created = await self._attempt(lambda: self.client.create_workflow(probe_workflow()))
        self._log_check("Workflows WRITE", created)
        if not created.ok:
            return False

        workflow_id = created.data.get("id") if isinstance(created.data, dict) else None
        if workflow_id is None:
            logger.warning("Probe workflow created without an id; it was not cleaned up")
            return True

        cleanup = await self._attempt(lambda: self.client.delete_workflow(str(workflow_id)))
        if cleanup.ok:
            logger.info("Test workflow %s cleaned up", workflow_id)
        else:
            logger.warning("Failed to clean up test workflow %s: %s", workflow_id, cleanup.error)
        return True

    @staticmethod
    def _log_check(label: str, result: StepResult) -> None:
        if result.ok:
            logger.info("%s permission: Available", label)
        else:
            logger.info("%s permission: Denied (%s)", label, result.error)
