"""Superfície de ferramentas: gateway de despacho, catálogo e adapter MCP."""

from api.tools.envelope import ToolEnvelope
from api.tools.registry import DispatchGateway, ToolDefinition, ToolRegistration

__all__ = [
    "DispatchGateway",
    "ToolDefinition",
    "ToolEnvelope",
    "ToolRegistration",
]
