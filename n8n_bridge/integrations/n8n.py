from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from n8n_bridge.config import Settings
from n8n_bridge.core.exceptions import N8NAPIError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-N8N-API-KEY"

QueryParams = dict[str, Any] | list[tuple[str, str]]


class N8NClient:
    """n8n public REST API client bound to one base URL and API key."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = settings.n8n_base_url
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                API_KEY_HEADER: settings.n8n_api_key.get_secret_value(),
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: QueryParams | None = None,
    ) -> Any:
        """Perform one call and return the decoded body of a 2xx response.

        Raises N8NAPIError for non-2xx responses, transport failures and requests
        that cannot be built (unencodable body, invalid URL).
        """
        try:
            request = self.client.build_request(method, path, json=json, params=params)
        except (TypeError, ValueError, httpx.InvalidURL) as exc:
            raise N8NAPIError(f"Invalid n8n request: {exc}") from exc

        try:
            response = await self.client.send(request)
            logger.debug("n8n %s %s -> %s", method, path, response.status_code)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise N8NAPIError(
                _status_error_message(exc.response),
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise N8NAPIError(str(exc) or type(exc).__name__) from exc
        return _decode_body(response)

    async def list_workflows(self, params: QueryParams | None = None) -> Any:
        return await self.request("GET", "/workflows", params=params)

    async def create_workflow(self, workflow: Any) -> Any:
        return await self.request("POST", "/workflows", json=workflow)

    async def get_workflow(self, workflow_id: str) -> Any:
        return await self.request("GET", f"/workflows/{_segment(workflow_id)}")

    async def update_workflow(self, workflow_id: str, workflow: Any) -> Any:
        return await self.request("PUT", f"/workflows/{_segment(workflow_id)}", json=workflow)

    async def delete_workflow(self, workflow_id: str) -> Any:
        return await self.request("DELETE", f"/workflows/{_segment(workflow_id)}")

    async def execute_workflow(self, workflow_id: str) -> Any:
        return await self.request("POST", f"/workflows/{_segment(workflow_id)}/execute")

    async def list_executions(self, params: QueryParams | None = None) -> Any:
        return await self.request("GET", "/executions", params=params)

    async def list_credentials(self) -> Any:
        return await self.request("GET", "/credentials")

    async def list_users(self) -> Any:
        return await self.request("GET", "/users")

    async def close(self) -> None:
        await self.client.aclose()


def _segment(value: str) -> str:
    """Escape an id so it stays a single path segment."""
    return quote(str(value), safe="")


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _status_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"].strip():
        return body["message"]
    return f"Request failed with status code {response.status_code}"
