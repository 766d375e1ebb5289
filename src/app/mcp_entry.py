"""Entrypoint MCP (stdio) do gateway Confluence.

Uso:
    confluence-mcp
    python -m app.mcp_entry

Logs vão para stderr; stdout é reservado ao protocolo.
"""

from __future__ import annotations

import asyncio

from api.tools.mcp_server import run_stdio
from app.bootstrap import get_gateway, initialize_app, validate_runtime_settings


def main() -> None:
    initialize_app()
    validate_runtime_settings(strict=True)
    asyncio.run(run_stdio(get_gateway()))


if __name__ == "__main__":
    main()
