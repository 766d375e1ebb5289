"""Adapter HTTP sobre o DispatchGateway.

GET  /tools         -> lista nome, descrição e JSON schema de cada operação
POST /tools/{name}  -> despacha a operação; corpo JSON = argumentos

O corpo de resposta do POST é sempre o envelope neutro; falhas de
domínio respondem 200 com `success: false`, como no adapter MCP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, HTTPException, Request

if TYPE_CHECKING:
    from api.tools.registry import DispatchGateway

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_gateway(request: Request) -> DispatchGateway:
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        logger.warning("tools_gateway_unavailable", extra={"path": request.url.path})
        raise HTTPException(status_code=503, detail="Confluence gateway not configured")
    return gateway


@router.get("")
async def list_tools(request: Request) -> list[dict[str, Any]]:
    gateway = _require_gateway(request)
    return [
        {
            "name": registration.name,
            "description": registration.description,
            "inputSchema": registration.input_schema,
        }
        for registration in gateway.registrations()
    ]


@router.post("/{operation_name}")
async def call_tool(
    operation_name: str,
    request: Request,
    arguments: Any = Body(default=None),
) -> dict[str, Any]:
    gateway = _require_gateway(request)
    envelope = await gateway.handle(operation_name, arguments if arguments is not None else {})
    return envelope.to_dict()
