import os
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault('N8N_API', 'test-key')
os.environ.setdefault('N8N_BASE_URL', 'http://n8n.test/api/v1')
os.environ.setdefault('N8N_PROBE_ON_STARTUP', 'false')

import httpx
import pytest
import pytest_asyncio

from n8n_bridge.config import Settings
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.main import create_app

BASE_URL = 'http://n8n.test/api/v1'


class FakeN8N:
    """Stand-in for the n8n REST API, served through httpx.MockTransport."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, Any] | Exception] = {}
        self.default: tuple[int, Any] | Exception = (404, {'message': 'not found'})
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, status_code: int = 200, json: Any = None) -> None:
        self.routes[(method, path)] = (status_code, json)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self.routes[(method, path)] = exc

    def calls(self, method: str | None = None) -> list[tuple[str, str]]:
        return [
            (r.method, r.url.path.removeprefix('/api/v1'))
            for r in self.requests
            if method is None or r.method == method
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix('/api/v1')
        outcome = self.routes.get((request.method, path), self.default)
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(N8N_API='test-key', N8N_BASE_URL=BASE_URL, N8N_PROBE_ON_STARTUP=False)


@pytest.fixture
def fake_n8n() -> FakeN8N:
    return FakeN8N()


@pytest_asyncio.fixture
async def n8n_client(settings, fake_n8n):
    client = N8NClient(settings, transport=fake_n8n.transport)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def test_client(settings, fake_n8n):
    app = create_app(settings=settings, transport=fake_n8n.transport)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url='http://bridge') as client:
        yield client
    await app.state.n8n_client.close()
