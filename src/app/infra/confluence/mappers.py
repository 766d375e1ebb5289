"""Mapeamento entre payloads da API Confluence e modelos de domínio.

Aceita os formatos v1 (/wiki/rest/api) e v2 (/api/v2). Links `webui`
relativos são convertidos em absolutos com a `web_base_url` do cliente.
"""

from __future__ import annotations

from typing import Any

from app.domain.page import Page, PageBody, PageLinks, PageSummary, PageVersion
from app.domain.pagination import PaginationInfo
from app.domain.requests import (
    CreatePageRequest,
    CreateSpaceRequest,
    UpdatePageRequest,
    UpdateSpaceRequest,
)
from app.domain.search import SearchResult, SearchResultContent
from app.domain.space import Space, SpaceLinks

DEFAULT_PAGE_LIMIT = 25


def absolute_link(web_base_url: str, link: str | None) -> str:
    """Prefixa link relativo com a base web; absolutos passam intactos."""
    if not link:
        return ""
    if link.startswith(("http://", "https://")):
        return link
    return f"{web_base_url.rstrip('/')}/{link.lstrip('/')}"


def _links(data: dict[str, Any]) -> dict[str, Any]:
    links = data.get("_links")
    return links if isinstance(links, dict) else {}


def _str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


# ──────────────────────────────────────────────────────────────────────────────
# Pages
# ──────────────────────────────────────────────────────────────────────────────


def map_page_version(data: dict[str, Any] | None) -> PageVersion:
    data = data or {}
    author = data.get("authorId")
    if author is None and isinstance(data.get("by"), dict):
        author = data["by"].get("accountId")
    return PageVersion(
        number=int(data.get("number") or 1),
        message=data.get("message") or None,
        created_at=data.get("createdAt") or data.get("when"),
        author_id=author,
    )


def map_page_body(data: dict[str, Any] | None) -> PageBody | None:
    if not isinstance(data, dict):
        return None
    for representation in ("storage", "atlas_doc_format", "editor", "wiki"):
        body = data.get(representation)
        if isinstance(body, dict) and body.get("value") is not None:
            return PageBody(
                value=body["value"],
                representation=body.get("representation") or representation,
            )
    return None


def map_page(data: dict[str, Any], web_base_url: str) -> Page:
    """Converte página v2 (ou conteúdo v1) em Page."""
    links = _links(data)
    version = map_page_version(data.get("version"))
    space = data.get("space") if isinstance(data.get("space"), dict) else {}
    ancestors = data.get("ancestors") or []
    parent_id = data.get("parentId")
    if parent_id is None and ancestors:
        parent_id = ancestors[-1].get("id")

    return Page(
        id=str(data["id"]),
        type=data.get("type") or "page",
        status=data.get("status") or "current",
        title=data.get("title") or "",
        space_id=str(data.get("spaceId") or space.get("id") or ""),
        parent_id=_str_or_none(parent_id),
        author_id=data.get("authorId") or version.author_id,
        created_at=data.get("createdAt") or version.created_at,
        updated_at=version.created_at,
        version=version,
        body=map_page_body(data.get("body")),
        links=PageLinks(
            webui=absolute_link(web_base_url, links.get("webui")),
            self_link=links.get("self") or "",
            editui=absolute_link(web_base_url, links.get("editui") or links.get("edit")),
            tinyui=absolute_link(web_base_url, links.get("tinyui")) or None,
        ),
        labels=_labels(data.get("labels")),
    )


def _labels(raw: Any) -> list[str]:
    if isinstance(raw, dict):
        raw = raw.get("results")
    if not isinstance(raw, list):
        return []
    return [item["name"] for item in raw if isinstance(item, dict) and item.get("name")]


def map_page_summary(data: dict[str, Any], web_base_url: str) -> PageSummary:
    version = map_page_version(data.get("version"))
    space = data.get("space") if isinstance(data.get("space"), dict) else {}
    return PageSummary(
        id=str(data["id"]),
        title=data.get("title") or "",
        status=data.get("status") or "current",
        type=data.get("type") or "page",
        space_id=str(data.get("spaceId") or space.get("id") or ""),
        author_id=data.get("authorId") or version.author_id,
        created_at=data.get("createdAt") or version.created_at,
        updated_at=version.created_at,
        version_number=version.number,
        webui=absolute_link(web_base_url, _links(data).get("webui")),
    )


def map_create_page_payload(request: CreatePageRequest) -> dict[str, Any]:
    """Payload v2 de POST /pages."""
    payload: dict[str, Any] = {
        "spaceId": request.space_id,
        "status": request.status or "current",
        "title": request.title,
        "body": {
            "representation": request.content_format or "storage",
            "value": request.content,
        },
    }
    if request.parent_page_id:
        payload["parentId"] = request.parent_page_id
    return payload


def map_update_page_payload(existing: Page, request: UpdatePageRequest) -> dict[str, Any]:
    """Payload v2 de PUT /pages/{id}.

    A v2 exige título e status em todo update; campos omitidos no request
    herdam o valor atual. A versão enviada é sempre a informada + 1.
    """
    payload: dict[str, Any] = {
        "id": existing.id,
        "status": request.status or existing.status,
        "title": request.title or existing.title,
        "version": {"number": request.version_number + 1},
    }
    if request.version_message:
        payload["version"]["message"] = request.version_message

    if request.content is not None:
        payload["body"] = {
            "representation": request.content_format or "storage",
            "value": request.content,
        }
    elif existing.body is not None:
        payload["body"] = {
            "representation": existing.body.representation,
            "value": existing.body.value,
        }
    return payload


# ──────────────────────────────────────────────────────────────────────────────
# Spaces
# ──────────────────────────────────────────────────────────────────────────────


def _plain_description(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw or None
    if isinstance(raw, dict):
        plain = raw.get("plain")
        if isinstance(plain, dict):
            return plain.get("value") or None
    return None


def map_space(data: dict[str, Any], web_base_url: str) -> Space:
    """Converte espaço v1 ou v2 em Space."""
    links = _links(data)
    homepage = data.get("homepage")
    homepage_id = data.get("homepageId")
    if homepage_id is None and isinstance(homepage, dict):
        homepage_id = homepage.get("id")

    return Space(
        id=str(data.get("id", "")),
        key=data.get("key") or "",
        name=data.get("name") or "",
        description=_plain_description(data.get("description")),
        type=data.get("type") or "global",
        status=data.get("status") or "current",
        created_at=data.get("createdAt"),
        homepage_id=_str_or_none(homepage_id),
        links=SpaceLinks(
            webui=absolute_link(web_base_url, links.get("webui")),
            self_link=links.get("self") or "",
        ),
    )


def map_create_space_payload(request: CreateSpaceRequest) -> dict[str, Any]:
    """Payload v1 de POST /space."""
    payload: dict[str, Any] = {"key": request.key, "name": request.name}
    if request.description:
        payload["description"] = {
            "plain": {"value": request.description, "representation": "plain"}
        }
    if request.type:
        payload["type"] = request.type
    return payload


def map_update_space_payload(existing: Space, request: UpdateSpaceRequest) -> dict[str, Any]:
    """Payload v1 de PUT /space/{key}; nome omitido herda o atual."""
    payload: dict[str, Any] = {"name": request.name or existing.name}
    if request.description is not None:
        payload["description"] = {
            "plain": {"value": request.description, "representation": "plain"}
        }
    if request.type:
        payload["type"] = request.type
    return payload


# ──────────────────────────────────────────────────────────────────────────────
# Search e paginação
# ──────────────────────────────────────────────────────────────────────────────


def map_search_result(item: dict[str, Any], web_base_url: str) -> SearchResult:
    """Converte item de /search (v1) em SearchResult."""
    content = item.get("content") if isinstance(item.get("content"), dict) else {}
    space = content.get("space") if isinstance(content.get("space"), dict) else {}
    version = content.get("version") if isinstance(content.get("version"), dict) else {}
    container = item.get("resultGlobalContainer") or {}
    author = version.get("by") if isinstance(version.get("by"), dict) else {}
    history = content.get("history") if isinstance(content.get("history"), dict) else {}

    return SearchResult(
        content=SearchResultContent(
            id=str(content.get("id", "")),
            type=content.get("type") or item.get("entityType") or "page",
            status=content.get("status") or "current",
            title=content.get("title") or item.get("title") or "",
            space_id=_str_or_none(space.get("id")),
            space_key=space.get("key"),
            space_name=space.get("name") or container.get("title"),
            author_id=author.get("accountId"),
            created_at=history.get("createdDate"),
            updated_at=version.get("when") or item.get("lastModified"),
            version_number=version.get("number"),
            webui=absolute_link(web_base_url, _links(content).get("webui") or item.get("url")),
        ),
        excerpt=item.get("excerpt") or None,
        score=float(item.get("score") or 0.0),
    )


def map_offset_pagination(response: dict[str, Any], result_count: int) -> PaginationInfo:
    """Paginação offset (v1): start/limit/size/totalSize."""
    start = int(response.get("start") or 0)
    limit = int(response.get("limit") or DEFAULT_PAGE_LIMIT)
    size = int(response.get("size") if response.get("size") is not None else result_count)
    total = response.get("totalSize")
    if total is not None:
        has_more = start + size < int(total)
    else:
        has_more = size == limit
    return PaginationInfo(start=start, limit=limit, size=size, has_more=has_more, total=total)


def map_cursor_pagination(
    response: dict[str, Any],
    result_count: int,
    limit: int | None,
    start: int | None,
) -> PaginationInfo:
    """Paginação por cursor (v2): has_more vem de `_links.next`."""
    return PaginationInfo(
        start=start or 0,
        limit=limit or DEFAULT_PAGE_LIMIT,
        size=result_count,
        has_more=bool(_links(response).get("next")),
    )
