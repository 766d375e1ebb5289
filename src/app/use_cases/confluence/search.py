"""Use cases de busca CQL."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.page import compute_page_statistics
from app.domain.responses import SearchContentResponse, SearchContext, SearchPagesResponse
from app.domain.search import compute_search_statistics
from app.domain.value_objects import SearchQuery
from app.use_cases.confluence._errors import operation_errors

if TYPE_CHECKING:
    from app.domain.requests import SearchContentRequest, SearchPagesRequest
    from app.protocols.page_repository import PageRepositoryProtocol
    from app.protocols.search_repository import SearchRepositoryProtocol


class SearchPagesUseCase:
    """Busca restrita a páginas e blogposts, com estatísticas por status."""

    def __init__(self, page_repository: PageRepositoryProtocol) -> None:
        self._pages = page_repository

    async def execute(self, request: SearchPagesRequest) -> SearchPagesResponse:
        with operation_errors("search pages"):
            query = SearchQuery.from_string(request.query)
            result, cql = await self._pages.search(request)
            return SearchPagesResponse(
                query=query.value,
                cql=cql,
                pages=result.pages,
                pagination=result.pagination,
                statistics=compute_page_statistics(result.pages),
            )


class SearchContentUseCase:
    """Busca de qualquer tipo de conteúdo, agregada por tipo e espaço."""

    def __init__(self, search_repository: SearchRepositoryProtocol) -> None:
        self._search = search_repository

    async def execute(self, request: SearchContentRequest) -> SearchContentResponse:
        with operation_errors("search content"):
            query = SearchQuery.from_string(request.query)
            result, cql = await self._search.search_content(request)
            return SearchContentResponse(
                results=result.results,
                pagination=result.pagination,
                context=SearchContext(
                    query=query.value,
                    cql=cql,
                    space_key=request.space_key,
                    content_type=request.type,
                    order_by=request.order_by or "relevance",
                    include_archived_spaces=request.include_archived_spaces,
                ),
                statistics=compute_search_statistics(
                    result.results,
                    total=result.pagination.total,
                ),
            )
