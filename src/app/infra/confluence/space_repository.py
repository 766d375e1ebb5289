"""Repositório de espaços sobre a API Confluence.

Leituras usam o cliente v2; criação e update usam o cliente v1
(a v2 não expõe escrita de espaços).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.confluence.http_base import TransportRequest
from api.connectors.confluence.http_errors import is_not_found
from app.domain.space import Space, SpaceList
from app.infra.confluence.mappers import (
    map_create_space_payload,
    map_cursor_pagination,
    map_space,
    map_update_space_payload,
)
from app.protocols.space_repository import SpaceRepositoryProtocol
from utils.errors import TransportError

if TYPE_CHECKING:
    from app.domain.requests import CreateSpaceRequest, GetSpacesRequest, UpdateSpaceRequest
    from app.domain.value_objects import SpaceKey
    from app.protocols.confluence_http import ConfluenceTransportProtocol

logger = logging.getLogger(__name__)


class ConfluenceSpaceRepository(SpaceRepositoryProtocol):
    """Repositório de espaços.

    Args:
        client: Cliente v2 (listagem e leitura)
        legacy_client: Cliente v1 (criação e update); default = `client`
    """

    def __init__(
        self,
        client: ConfluenceTransportProtocol,
        legacy_client: ConfluenceTransportProtocol | None = None,
    ) -> None:
        self._client = client
        self._legacy_client = legacy_client or client

    async def find_all(self, request: GetSpacesRequest) -> SpaceList:
        params: dict[str, Any] = {
            "type": request.type,
            "status": request.status,
            "limit": request.limit,
            "start": request.start or None,
        }
        data = await self._client.send_request(TransportRequest("GET", "/spaces", params=params))
        results = data.get("results") or []
        return SpaceList(
            spaces=[map_space(item, self._client.web_base_url) for item in results],
            pagination=map_cursor_pagination(data, len(results), request.limit, request.start),
        )

    async def find_by_key(self, key: SpaceKey) -> Space | None:
        data = await self._client.send_request(
            TransportRequest("GET", "/spaces", params={"keys": key.value, "limit": 1})
        )
        for item in data.get("results") or []:
            if item.get("key") == key.value:
                return map_space(item, self._client.web_base_url)
        return None

    async def find_by_id(self, space_id: str) -> Space | None:
        try:
            data = await self._client.send_request(TransportRequest("GET", f"/spaces/{space_id}"))
        except TransportError as exc:
            if is_not_found(exc):
                return None
            raise
        return map_space(data, self._client.web_base_url)

    async def create(self, request: CreateSpaceRequest) -> Space:
        data = await self._legacy_client.send_request(
            TransportRequest("POST", "/space", data=map_create_space_payload(request))
        )
        logger.info("confluence_space_created", extra={"space_key": request.key})
        return map_space(data, self._legacy_client.web_base_url)

    async def update(self, existing: Space, request: UpdateSpaceRequest) -> Space:
        data = await self._legacy_client.send_request(
            TransportRequest(
                "PUT",
                f"/space/{existing.key}",
                data=map_update_space_payload(existing, request),
            )
        )
        logger.info("confluence_space_updated", extra={"space_key": existing.key})
        return map_space(data, self._legacy_client.web_base_url)

    async def exists(self, key: SpaceKey) -> bool:
        return await self.find_by_key(key) is not None
