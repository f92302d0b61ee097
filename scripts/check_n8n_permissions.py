"""
Run the n8n permission probe once and print the report as JSON.

Usage:
  python scripts/check_n8n_permissions.py

Exits with status 1 when the n8n API could not be reached with the configured key.
"""
from __future__ import annotations

import asyncio
import logging
import sys

from n8n_bridge.config import get_settings
from n8n_bridge.integrations.n8n import N8NClient
from n8n_bridge.services.permission_probe import PermissionProbe


async def probe() -> bool:
    settings = get_settings()
    client = N8NClient(settings)
    try:
        report = await PermissionProbe(client).run()
    finally:
        await client.close()
    print(f"n8n API URL: {settings.n8n_base_url}")
    print(report.model_dump_json(indent=2))
    return report.connection


def main() -> None:
    logging.basicConfig(level=get_settings().log_level, format="%(levelname)s %(message)s")
    if not asyncio.run(probe()):
        sys.exit(1)


if __name__ == "__main__":
    main()
