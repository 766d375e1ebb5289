"""Testes do adapter MCP sobre o gateway."""

from __future__ import annotations

import json

import mcp.types as types
import pytest

from api.tools import DispatchGateway, ToolDefinition
from api.tools.mcp_server import SERVER_NAME, build_mcp_server
from api.validators.confluence import operations as ops
from api.validators.confluence.operations import get_validator


async def _echo(request: object) -> dict[str, str]:
    return {"pageId": request.page_id}  # type: ignore[attr-defined]


@pytest.fixture
def gateway() -> DispatchGateway:
    return DispatchGateway(
        [
            ToolDefinition(
                name=ops.GET_PAGE,
                description="Get page",
                validator=get_validator(ops.GET_PAGE),
                handler=_echo,
            )
        ]
    )


@pytest.mark.asyncio
async def test_lists_registered_tools(gateway: DispatchGateway) -> None:
    server = build_mcp_server(gateway)
    handler = server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))

    tools = result.root.tools
    assert server.name == SERVER_NAME
    assert [tool.name for tool in tools] == [ops.GET_PAGE]
    assert "pageId" in tools[0].inputSchema["properties"]


@pytest.mark.asyncio
async def test_call_tool_returns_envelope_text(gateway: DispatchGateway) -> None:
    server = build_mcp_server(gateway)
    handler = server.request_handlers[types.CallToolRequest]

    result = await handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name=ops.GET_PAGE, arguments={"pageId": "42"}),
        )
    )

    content = result.root.content
    assert json.loads(content[0].text) == {"success": True, "data": {"pageId": "42"}}


@pytest.mark.asyncio
async def test_call_tool_validation_message_comes_from_gateway(gateway: DispatchGateway) -> None:
    server = build_mcp_server(gateway)
    handler = server.request_handlers[types.CallToolRequest]

    result = await handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name=ops.GET_PAGE, arguments={}),
        )
    )

    payload = json.loads(result.root.content[0].text)
    assert payload == {"success": False, "message": "pageId: Field required"}
