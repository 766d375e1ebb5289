"""Protocolo HTTP consumido pelos repositórios Confluence.

Repositórios dependem deste contrato, não da classe concreta do cliente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api.connectors.confluence.http_base import TransportRequest


class ConfluenceTransportProtocol(Protocol):
    """Contrato mínimo de um cliente Confluence (v1 ou v2)."""

    @property
    def web_base_url(self) -> str: ...

    async def send_request(self, request: TransportRequest) -> Any: ...
