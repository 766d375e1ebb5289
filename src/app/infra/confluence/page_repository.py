"""Repositório de páginas sobre a API Confluence.

CRUD e listagens usam o cliente v2; busca CQL e lookup por título usam
o cliente v1 (única geração com /search).

Política de ausência:
- find_by_id / find_by_title / get_version: 404 vira None
- get_comment_count: 404 vira 0 (fallback logado)
- qualquer outra falha propaga como TransportError
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.confluence.http_base import TransportRequest
from api.connectors.confluence.http_errors import is_not_found
from app.domain.page import Page, PageList, PageVersion
from app.infra.confluence.cql import build_search_cql, build_title_lookup_cql
from app.infra.confluence.mappers import (
    map_create_page_payload,
    map_cursor_pagination,
    map_offset_pagination,
    map_page,
    map_page_summary,
    map_update_page_payload,
)
from app.protocols.page_repository import PageRepositoryProtocol
from config.logging import log_fallback
from utils.errors import TransportError

if TYPE_CHECKING:
    from app.domain.requests import CreatePageRequest, SearchPagesRequest, UpdatePageRequest
    from app.domain.value_objects import PageId, PageTitle
    from app.protocols.confluence_http import ConfluenceTransportProtocol

logger = logging.getLogger(__name__)

# Fallback nomeado: página sem endpoint de comentários conta como zero
COMMENT_COUNT_FALLBACK = 0

_SEARCHABLE_PAGE_TYPES = frozenset({"page", "blogpost"})
_SEARCH_EXPAND = "content.space,content.version"
_COMMENTS_LIMIT = 250


def _cursor(start: int | None) -> str | None:
    """Listagens v2 recebem o `start` como cursor; 0 é a primeira página."""
    return str(start) if start else None


class ConfluencePageRepository(PageRepositoryProtocol):
    """Repositório de páginas.

    Args:
        client: Cliente v2 (CRUD, listagens, comentários)
        search_client: Cliente v1 para CQL; default = `client`
    """

    def __init__(
        self,
        client: ConfluenceTransportProtocol,
        search_client: ConfluenceTransportProtocol | None = None,
    ) -> None:
        self._client = client
        self._search_client = search_client or client

    @property
    def _web_base_url(self) -> str:
        return self._client.web_base_url

    async def find_by_id(
        self,
        page_id: PageId,
        *,
        include_content: bool = True,
        expand: str | None = None,
    ) -> Page | None:
        params: dict[str, Any] = {}
        if include_content:
            params["body-format"] = "storage"
        if expand:
            params["expand"] = expand

        try:
            data = await self._client.send_request(
                TransportRequest("GET", f"/pages/{page_id.value}", params=params)
            )
        except TransportError as exc:
            if is_not_found(exc):
                return None
            raise
        return map_page(data, self._web_base_url)

    async def find_by_title(self, space_id: str, title: PageTitle) -> Page | None:
        try:
            data = await self._search_client.send_request(
                TransportRequest(
                    "GET",
                    "/search",
                    params={
                        "cql": build_title_lookup_cql(space_id, title.value),
                        "limit": 1,
                        "expand": _SEARCH_EXPAND,
                    },
                )
            )
        except TransportError as exc:
            if is_not_found(exc):
                return None
            raise

        for item in data.get("results") or []:
            content = item.get("content")
            # CQL `title =` também casa variações; confirma igualdade exata
            if isinstance(content, dict) and content.get("title") == title.value:
                content.setdefault("spaceId", space_id)
                return map_page(content, self._search_client.web_base_url)
        return None

    async def find_by_space_id(
        self,
        space_id: str,
        *,
        limit: int | None = None,
        start: int | None = None,
    ) -> PageList:
        return await self._list_pages(
            "/pages",
            {"space-id": space_id, "limit": limit, "cursor": _cursor(start)},
            limit,
            start,
        )

    async def find_children(
        self,
        parent_id: PageId,
        *,
        limit: int | None = None,
        start: int | None = None,
    ) -> PageList:
        return await self._list_pages(
            f"/pages/{parent_id.value}/children",
            {"limit": limit, "cursor": _cursor(start)},
            limit,
            start,
        )

    async def _list_pages(
        self,
        endpoint: str,
        params: dict[str, Any],
        limit: int | None,
        start: int | None,
    ) -> PageList:
        data = await self._client.send_request(TransportRequest("GET", endpoint, params=params))
        results = data.get("results") or []
        return PageList(
            pages=[map_page_summary(item, self._web_base_url) for item in results],
            pagination=map_cursor_pagination(data, len(results), limit, start),
        )

    async def search(self, request: SearchPagesRequest) -> tuple[PageList, str]:
        cql = build_search_cql(
            request.query,
            space_key=request.space_key,
            content_type=request.type,
            order_by=request.order_by,
        )
        data = await self._search_client.send_request(
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

        web_base_url = self._search_client.web_base_url
        pages = [
            map_page_summary(item["content"], web_base_url)
            for item in data.get("results") or []
            if isinstance(item.get("content"), dict)
            and item["content"].get("type") in _SEARCHABLE_PAGE_TYPES
        ]
        pagination = map_offset_pagination(data, len(pages)).model_copy(
            update={"size": len(pages)}
        )
        return PageList(pages=pages, pagination=pagination), cql

    async def create(self, request: CreatePageRequest) -> Page:
        data = await self._client.send_request(
            TransportRequest("POST", "/pages", data=map_create_page_payload(request))
        )
        logger.info(
            "confluence_page_created",
            extra={"page_id": data.get("id"), "space_id": request.space_id},
        )
        return map_page(data, self._web_base_url)

    async def update(self, existing: Page, request: UpdatePageRequest) -> Page:
        data = await self._client.send_request(
            TransportRequest(
                "PUT",
                f"/pages/{existing.id}",
                data=map_update_page_payload(existing, request),
            )
        )
        logger.info(
            "confluence_page_updated",
            extra={"page_id": existing.id, "version": request.version_number + 1},
        )
        return map_page(data, self._web_base_url)

    async def delete(self, page_id: PageId) -> None:
        await self._client.send_request(TransportRequest("DELETE", f"/pages/{page_id.value}"))
        logger.info("confluence_page_deleted", extra={"page_id": page_id.value})

    async def exists(self, page_id: PageId) -> bool:
        return await self.find_by_id(page_id, include_content=False) is not None

    async def get_version(self, page_id: PageId) -> PageVersion | None:
        page = await self.find_by_id(page_id, include_content=False)
        return page.version if page else None

    async def get_comment_count(self, page_id: PageId) -> int:
        started = time.perf_counter()
        try:
            data = await self._client.send_request(
                TransportRequest(
                    "GET",
                    f"/pages/{page_id.value}/footer-comments",
                    params={"limit": _COMMENTS_LIMIT},
                )
            )
        except TransportError as exc:
            if not is_not_found(exc):
                raise
            log_fallback(
                logger,
                "comment_count",
                reason="not_found",
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )
            return COMMENT_COUNT_FALLBACK
        return len(data.get("results") or [])
