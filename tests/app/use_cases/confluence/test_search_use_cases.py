"""Testes dos use cases de busca."""

from __future__ import annotations

import pytest

from app.domain.pagination import PaginationInfo
from app.domain.requests import SearchContentRequest, SearchPagesRequest
from app.domain.search import SearchResult, SearchResultContent, SearchResultList
from app.use_cases.confluence import SearchContentUseCase, SearchPagesUseCase
from tests.fakes.fake_confluence import FakeSearchRepository, InMemoryPageRepository, make_page
from utils.errors import InvalidSearchQueryError


@pytest.mark.asyncio
async def test_search_pages_returns_cql_and_statistics() -> None:
    repo = InMemoryPageRepository(
        [
            make_page("1", title="Deploy guide"),
            make_page("2", title="Deploy checklist", status="draft"),
        ]
    )

    response = await SearchPagesUseCase(repo).execute(SearchPagesRequest(query="deploy"))

    assert response.query == "deploy"
    assert response.cql == 'text ~ "deploy"'
    assert response.statistics.total_pages == 2
    assert response.statistics.draft_pages == 1


@pytest.mark.asyncio
async def test_search_content_builds_context() -> None:
    result = SearchResultList(
        results=[
            SearchResult(
                content=SearchResultContent(
                    id="1", type="page", title="A", space_key="ENG", space_name="Engineering"
                )
            )
        ],
        pagination=PaginationInfo(size=1, total=12),
    )
    repo = FakeSearchRepository(result, cql='text ~ "a" AND space.key = "ENG"')

    response = await SearchContentUseCase(repo).execute(
        SearchContentRequest(query="a", space_key="ENG")
    )

    assert response.context.order_by == "relevance"
    assert response.context.include_archived_spaces is True
    assert response.context.cql == 'text ~ "a" AND space.key = "ENG"'
    assert response.statistics.total_results == 12
    assert response.statistics.results_by_space[0].space_key == "ENG"


@pytest.mark.asyncio
async def test_blank_query_rejected_before_repository() -> None:
    repo = FakeSearchRepository()
    request = SearchContentRequest.model_construct(query="   ", include_archived_spaces=True)

    with pytest.raises(InvalidSearchQueryError):
        await SearchContentUseCase(repo).execute(request)
    assert repo.requests == []
