"""Repositório de busca CQL (cliente v1)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.confluence.http_base import TransportRequest
from app.domain.search import SearchResultList
from app.infra.confluence.cql import build_search_cql
from app.infra.confluence.mappers import map_offset_pagination, map_search_result
from app.protocols.search_repository import SearchRepositoryProtocol

if TYPE_CHECKING:
    from app.domain.requests import SearchContentRequest
    from app.protocols.confluence_http import ConfluenceTransportProtocol

_SEARCH_EXPAND = "content.space,content.version,content.history"


class ConfluenceSearchRepository(SearchRepositoryProtocol):
    """Busca de conteúdo via GET /search."""

    def __init__(self, client: ConfluenceTransportProtocol) -> None:
        self._client = client

    async def search_content(self, request: SearchContentRequest) -> tuple[SearchResultList, str]:
        cql = build_search_cql(
            request.query,
            space_key=request.space_key,
            content_type=request.type,
            include_archived_spaces=request.include_archived_spaces,
            order_by=request.order_by,
        )
        data = await self._client.send_request(
            TransportRequest(
                "GET",
                "/search",
                params={
                    "cql": cql,
                    "limit": request.limit,
                    "start": request.start,
                    "expand": _SEARCH_EXPAND,
                },
            )
        )
        results = [
            map_search_result(item, self._client.web_base_url)
            for item in data.get("results") or []
        ]
        return (
            SearchResultList(
                results=results,
                pagination=map_offset_pagination(data, len(results)),
            ),
            cql,
        )
