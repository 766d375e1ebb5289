"""Testes dos repositórios Confluence sobre um transport fake."""

from __future__ import annotations

import logging

import pytest

from app.domain.requests import (
    CreateSpaceRequest,
    GetSpacesRequest,
    SearchContentRequest,
    SearchPagesRequest,
    UpdatePageRequest,
    UpdateSpaceRequest,
)
from app.domain.value_objects import PageId, PageTitle, SpaceKey
from app.infra.confluence import (
    ConfluencePageRepository,
    ConfluenceSearchRepository,
    ConfluenceSpaceRepository,
)
from app.infra.confluence.page_repository import COMMENT_COUNT_FALLBACK
from tests.fakes.fake_confluence import FakeTransport, make_page, make_space
from utils.errors import HttpStatusError, NetworkError


def _not_found() -> HttpStatusError:
    return HttpStatusError("Not found", 404, "/pages/1")


class TestPageRepository:
    @pytest.mark.asyncio
    async def test_find_by_id_requests_storage_body(self) -> None:
        transport = FakeTransport([{"id": "1", "title": "A", "version": {"number": 2}}])
        repo = ConfluencePageRepository(transport)

        page = await repo.find_by_id(PageId("1"))

        assert page is not None
        assert page.version.number == 2
        request = transport.requests[0]
        assert request.url == "/pages/1"
        assert request.params == {"body-format": "storage"}

    @pytest.mark.asyncio
    async def test_find_by_id_not_found_returns_none(self) -> None:
        repo = ConfluencePageRepository(FakeTransport([_not_found()]))
        assert await repo.find_by_id(PageId("1")) is None

    @pytest.mark.asyncio
    async def test_find_by_id_propagates_other_errors(self) -> None:
        repo = ConfluencePageRepository(FakeTransport([NetworkError("down", "/pages/1")]))
        with pytest.raises(NetworkError):
            await repo.find_by_id(PageId("1"))

    @pytest.mark.asyncio
    async def test_find_by_title_uses_search_client_and_exact_match(self) -> None:
        pages_client = FakeTransport()
        search_client = FakeTransport(
            [
                {
                    "results": [
                        {"content": {"id": "8", "title": "Runbook v2", "version": {"number": 1}}},
                        {"content": {"id": "9", "title": "Runbook", "version": {"number": 3}}},
                    ]
                }
            ]
        )
        repo = ConfluencePageRepository(pages_client, search_client=search_client)

        page = await repo.find_by_title("55", PageTitle("Runbook"))

        assert page is not None
        assert page.id == "9"
        assert page.space_id == "55"
        assert pages_client.requests == []
        assert search_client.requests[0].url == "/search"
        assert 'title = "Runbook"' in search_client.requests[0].params["cql"]

    @pytest.mark.asyncio
    async def test_find_by_space_id_uses_cursor_pagination(self) -> None:
        transport = FakeTransport(
            [
                {
                    "results": [{"id": "1", "title": "A"}, {"id": "2", "title": "B"}],
                    "_links": {"next": "/api/v2/pages?cursor=xyz"},
                }
            ]
        )
        repo = ConfluencePageRepository(transport)

        result = await repo.find_by_space_id("55", limit=2)

        assert [p.id for p in result.pages] == ["1", "2"]
        assert result.pagination.has_more is True
        assert transport.requests[0].params == {"space-id": "55", "limit": 2, "cursor": None}

    @pytest.mark.asyncio
    async def test_listings_forward_start_as_cursor(self) -> None:
        transport = FakeTransport([{"results": [], "_links": {}}, {"results": [], "_links": {}}])
        repo = ConfluencePageRepository(transport)

        by_space = await repo.find_by_space_id("55", start=25)
        children = await repo.find_children(PageId("123"), limit=10, start=50)

        assert transport.requests[0].params["cursor"] == "25"
        assert transport.requests[1].url == "/pages/123/children"
        assert transport.requests[1].params == {"limit": 10, "cursor": "50"}
        assert by_space.pagination.start == 25
        assert children.pagination.start == 50

    @pytest.mark.asyncio
    async def test_search_filters_non_page_content(self) -> None:
        search_client = FakeTransport(
            [
                {
                    "results": [
                        {"content": {"id": "1", "type": "page", "title": "A"}},
                        {"content": {"id": "2", "type": "comment", "title": "B"}},
                        {"content": {"id": "3", "type": "blogpost", "title": "C"}},
                    ],
                    "start": 0,
                    "limit": 25,
                    "size": 3,
                }
            ]
        )
        repo = ConfluencePageRepository(FakeTransport(), search_client=search_client)

        result, cql = await repo.search(SearchPagesRequest(query="deploy", space_key="ENG"))

        assert [p.id for p in result.pages] == ["1", "3"]
        assert result.pagination.size == 2
        assert cql == 'text ~ "deploy" AND space.key = "ENG"'

    @pytest.mark.asyncio
    async def test_update_sends_next_version(self) -> None:
        transport = FakeTransport([{"id": "1", "title": "A", "version": {"number": 4}}])
        repo = ConfluencePageRepository(transport)
        existing = make_page("1", title="A", version=3)

        updated = await repo.update(existing, UpdatePageRequest(page_id="1", version_number=3))

        assert updated.version.number == 4
        request = transport.requests[0]
        assert request.method == "PUT"
        assert request.data["version"]["number"] == 4

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        transport = FakeTransport([{}])
        await ConfluencePageRepository(transport).delete(PageId("7"))
        assert transport.requests[0].method == "DELETE"
        assert transport.requests[0].url == "/pages/7"

    @pytest.mark.asyncio
    async def test_comment_count(self) -> None:
        transport = FakeTransport([{"results": [{"id": "c1"}, {"id": "c2"}]}])
        assert await ConfluencePageRepository(transport).get_comment_count(PageId("1")) == 2
        assert transport.requests[0].url == "/pages/1/footer-comments"

    @pytest.mark.asyncio
    async def test_comment_count_falls_back_on_not_found(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        repo = ConfluencePageRepository(FakeTransport([_not_found()]))
        with caplog.at_level(logging.INFO):
            count = await repo.get_comment_count(PageId("1"))

        assert count == COMMENT_COUNT_FALLBACK
        assert any(getattr(r, "fallback_used", False) for r in caplog.records)

    @pytest.mark.asyncio
    async def test_exists_and_get_version(self) -> None:
        transport = FakeTransport(
            [{"id": "1", "title": "A", "version": {"number": 5}}, _not_found()]
        )
        repo = ConfluencePageRepository(transport)
        version = await repo.get_version(PageId("1"))
        assert version is not None and version.number == 5
        assert await repo.exists(PageId("2")) is False


class TestSpaceRepository:
    @pytest.mark.asyncio
    async def test_find_all(self) -> None:
        transport = FakeTransport(
            [{"results": [{"id": 1, "key": "ENG", "name": "Engineering"}], "_links": {}}]
        )
        repo = ConfluenceSpaceRepository(transport)

        result = await repo.find_all(GetSpacesRequest(type="global", limit=10))

        assert [s.key for s in result.spaces] == ["ENG"]
        assert result.pagination.has_more is False
        assert transport.requests[0].params == {
            "type": "global",
            "status": None,
            "limit": 10,
            "start": None,
        }

    @pytest.mark.asyncio
    async def test_find_all_forwards_start(self) -> None:
        transport = FakeTransport([{"results": [], "_links": {}}])
        repo = ConfluenceSpaceRepository(transport)

        await repo.find_all(GetSpacesRequest(limit=5, start=20))

        assert transport.requests[0].params["start"] == 20

    @pytest.mark.asyncio
    async def test_find_by_key_requires_exact_key(self) -> None:
        transport = FakeTransport([{"results": [{"id": 1, "key": "ENGX", "name": "Other"}]}])
        repo = ConfluenceSpaceRepository(transport)
        assert await repo.find_by_key(SpaceKey("ENG")) is None

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self) -> None:
        repo = ConfluenceSpaceRepository(FakeTransport([_not_found()]))
        assert await repo.find_by_id("404") is None

    @pytest.mark.asyncio
    async def test_writes_go_to_legacy_client(self) -> None:
        client = FakeTransport()
        legacy = FakeTransport(
            [
                {"id": 3, "key": "NEW", "name": "New space"},
                {"id": 1001, "key": "ENG", "name": "Renamed"},
            ]
        )
        repo = ConfluenceSpaceRepository(client, legacy_client=legacy)

        created = await repo.create(CreateSpaceRequest(key="NEW", name="New space"))
        updated = await repo.update(make_space(), UpdateSpaceRequest(key="ENG", name="Renamed"))

        assert created.key == "NEW"
        assert updated.name == "Renamed"
        assert client.requests == []
        assert [(r.method, r.url) for r in legacy.requests] == [
            ("POST", "/space"),
            ("PUT", "/space/ENG"),
        ]


class TestSearchRepository:
    @pytest.mark.asyncio
    async def test_search_content(self) -> None:
        transport = FakeTransport(
            [
                {
                    "results": [
                        {"content": {"id": "1", "type": "page", "title": "A"}, "score": 2},
                    ],
                    "start": 0,
                    "limit": 25,
                    "size": 1,
                    "totalSize": 1,
                }
            ]
        )
        repo = ConfluenceSearchRepository(transport)

        result, cql = await repo.search_content(
            SearchContentRequest(query="x", include_archived_spaces=False, order_by="title")
        )

        assert len(result.results) == 1
        assert result.pagination.total == 1
        assert cql == 'text ~ "x" AND space.status = current ORDER BY title ASC'
        assert transport.requests[0].params["cql"] == cql
