"""Testes de mapeamento payload Confluence <-> domínio."""

from __future__ import annotations

from app.domain.requests import (
    CreatePageRequest,
    CreateSpaceRequest,
    UpdatePageRequest,
    UpdateSpaceRequest,
)
from app.infra.confluence.mappers import (
    absolute_link,
    map_create_page_payload,
    map_create_space_payload,
    map_cursor_pagination,
    map_offset_pagination,
    map_page,
    map_search_result,
    map_space,
    map_update_page_payload,
    map_update_space_payload,
)
from tests.fakes.fake_confluence import make_page, make_space

WEB = "https://acme.atlassian.net/wiki"

V2_PAGE = {
    "id": "123",
    "status": "current",
    "title": "Runbook",
    "spaceId": "55",
    "parentId": "10",
    "authorId": "acc-1",
    "createdAt": "2024-01-10T10:00:00.000Z",
    "version": {"number": 4, "message": "edit", "createdAt": "2024-02-01T09:00:00.000Z"},
    "body": {"storage": {"value": "<p>hi</p>", "representation": "storage"}},
    "_links": {"webui": "/spaces/ENG/pages/123/Runbook", "editui": "/pages/resumedraft.action"},
}


class TestPages:
    def test_map_v2_page(self) -> None:
        page = map_page(V2_PAGE, WEB)
        assert page.id == "123"
        assert page.space_id == "55"
        assert page.parent_id == "10"
        assert page.version.number == 4
        assert page.content == "<p>hi</p>"
        assert page.links.webui == f"{WEB}/spaces/ENG/pages/123/Runbook"
        assert page.updated_at is not None

    def test_map_v1_content(self) -> None:
        page = map_page(
            {
                "id": 9,
                "type": "blogpost",
                "title": "News",
                "space": {"id": 77, "key": "ENG"},
                "ancestors": [{"id": "1"}, {"id": "2"}],
                "version": {"number": 2, "by": {"accountId": "acc-9"}},
            },
            WEB,
        )
        assert page.id == "9"
        assert page.type == "blogpost"
        assert page.space_id == "77"
        assert page.parent_id == "2"
        assert page.author_id == "acc-9"
        assert page.body is None

    def test_absolute_link(self) -> None:
        assert absolute_link(WEB, "/x") == f"{WEB}/x"
        assert absolute_link(WEB, "https://elsewhere/x") == "https://elsewhere/x"
        assert absolute_link(WEB, None) == ""

    def test_create_payload(self) -> None:
        request = CreatePageRequest(
            space_id="55", title="New", content="<p>x</p>", parent_page_id="10"
        )
        assert map_create_page_payload(request) == {
            "spaceId": "55",
            "status": "current",
            "title": "New",
            "body": {"representation": "storage", "value": "<p>x</p>"},
            "parentId": "10",
        }

    def test_update_payload_increments_version_and_inherits_fields(self) -> None:
        existing = make_page("123", title="Old", version=3, content="<p>old</p>")
        request = UpdatePageRequest(page_id="123", version_number=3, version_message="typo")
        payload = map_update_page_payload(existing, request)
        assert payload["version"] == {"number": 4, "message": "typo"}
        assert payload["title"] == "Old"
        assert payload["status"] == "current"
        assert payload["body"] == {"representation": "storage", "value": "<p>old</p>"}

    def test_update_payload_new_content(self) -> None:
        existing = make_page("123", version=1)
        request = UpdatePageRequest(
            page_id="123",
            version_number=1,
            title="New",
            content="h1. Hi",
            content_format="wiki",
        )
        payload = map_update_page_payload(existing, request)
        assert payload["title"] == "New"
        assert payload["body"] == {"representation": "wiki", "value": "h1. Hi"}


class TestSpaces:
    def test_map_v1_space(self) -> None:
        space = map_space(
            {
                "id": 1001,
                "key": "ENG",
                "name": "Engineering",
                "description": {"plain": {"value": "Team space"}},
                "homepage": {"id": 5},
                "_links": {"webui": "/spaces/ENG"},
            },
            WEB,
        )
        assert space.id == "1001"
        assert space.description == "Team space"
        assert space.homepage_id == "5"
        assert space.links.webui == f"{WEB}/spaces/ENG"

    def test_space_payloads(self) -> None:
        create = map_create_space_payload(
            CreateSpaceRequest(key="ENG", name="Engineering", description="Docs")
        )
        assert create == {
            "key": "ENG",
            "name": "Engineering",
            "description": {"plain": {"value": "Docs", "representation": "plain"}},
        }

        update = map_update_space_payload(make_space(), UpdateSpaceRequest(key="ENG"))
        assert update == {"name": "Engineering"}


class TestSearchAndPagination:
    def test_map_search_result(self) -> None:
        result = map_search_result(
            {
                "content": {
                    "id": "1",
                    "type": "page",
                    "title": "Runbook",
                    "space": {"id": 55, "key": "ENG", "name": "Engineering"},
                    "version": {"number": 3, "when": "2024-01-01T00:00:00.000Z"},
                    "_links": {"webui": "/x"},
                },
                "excerpt": "the @@@hl@@@runbook@@@endhl@@@",
                "score": 1.5,
            },
            WEB,
        )
        assert result.content.space_key == "ENG"
        assert result.content.space_id == "55"
        assert result.content.version_number == 3
        assert result.content.webui == f"{WEB}/x"
        assert result.score == 1.5

    def test_offset_pagination_with_total(self) -> None:
        info = map_offset_pagination({"start": 0, "limit": 10, "size": 10, "totalSize": 25}, 10)
        assert info.has_more is True
        assert info.total == 25

        last = map_offset_pagination({"start": 20, "limit": 10, "size": 5, "totalSize": 25}, 5)
        assert last.has_more is False

    def test_cursor_pagination_uses_next_link(self) -> None:
        with_next = map_cursor_pagination({"_links": {"next": "/pages?cursor=abc"}}, 25, 25, None)
        assert with_next.has_more is True
        assert with_next.start == 0

        without_next = map_cursor_pagination({"_links": {}}, 3, None, 50)
        assert without_next.has_more is False
        assert without_next.limit == 25
        assert without_next.start == 50
