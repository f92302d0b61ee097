"""
n8n AI Bridge - FastAPI Application
Forwards a local API surface to the n8n REST API with the API key injected.
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from n8n_bridge import __version__
from n8n_bridge.api.routes import executions, health, n8n, workflows
from n8n_bridge.config import Settings, get_settings
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.services.permission_probe import PermissionProbe

logger = logging.getLogger(__name__)


def _log_endpoints(app: FastAPI) -> None:
    logger.info("Available endpoints:")
    for route in app.routes:
        if isinstance(route, APIRoute) and route.include_in_schema:
            methods = ",".join(sorted(route.methods))
            logger.info("   %-5s %s - %s", methods, route.path, route.summary or route.name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    settings: Settings = app.state.settings
    client: N8NClient = app.state.n8n_client

    logger.info("%s running on port %s", settings.app_name, settings.port)
    logger.info("Base URL: http://localhost:%s", settings.port)
    logger.info("n8n API URL: %s", settings.n8n_base_url)
    if not settings.has_api_key:
        logger.warning("N8N_API is not configured; n8n calls will be rejected")

    probe_task: asyncio.Task | None = None
    if settings.probe_on_startup:
        probe_task = asyncio.create_task(PermissionProbe(client).run())

    app.state.startup_probe = probe_task
    _log_endpoints(app)
    logger.info("Ready for AI interactions!")
    yield
    # Shutdown
    if probe_task is not None and not probe_task.done():
        probe_task.cancel()
        try:
            await probe_task
        except asyncio.CancelledError:
            pass
    await client.close()
    logger.info("Shutting down %s...", settings.app_name)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="HTTP bridge to the n8n workflow automation API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.n8n_client = N8NClient(settings, transport=transport)
    app.state.startup_probe = None

    # Respect forwarded proto/host when deployed behind a proxy.
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(n8n.router, prefix="/api/n8n", tags=["n8n"])
    app.include_router(workflows.router, prefix="/api/workflows", tags=["Workflows"])
    app.include_router(executions.router, prefix="/api/executions", tags=["Executions"])
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the bridge with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
