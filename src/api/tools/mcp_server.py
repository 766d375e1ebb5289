"""Adapter MCP (stdio) sobre o DispatchGateway.

Lista cada ToolRegistration como tool MCP e devolve o envelope
renderizado como bloco de texto JSON.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

if TYPE_CHECKING:
    from api.tools.registry import DispatchGateway

logger = logging.getLogger(__name__)

SERVER_NAME = "confluence-mcp"


def build_mcp_server(gateway: DispatchGateway, name: str = SERVER_NAME) -> Server:
    """Cria o servidor MCP ligado ao gateway."""
    server: Server = Server(name)
    registrations = {reg.name: reg for reg in gateway.registrations()}

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=reg.name,
                description=reg.description,
                inputSchema=reg.input_schema,
            )
            for reg in registrations.values()
        ]

    # Validação fica a cargo do gateway (mensagem do primeiro erro)
    @server.call_tool(validate_input=False)
    async def call_tool(tool_name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        envelope = await gateway.handle(tool_name, arguments or {})
        return [types.TextContent(type="text", text=envelope.render_json())]

    return server


async def run_stdio(gateway: DispatchGateway) -> None:
    """Serve o gateway via stdio até o cliente encerrar."""
    server = build_mcp_server(gateway)
    logger.info("mcp_server_starting", extra={"tools_count": len(gateway.operation_names)})
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("mcp_server_stopped")
