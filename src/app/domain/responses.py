"""Respostas dos use cases Confluence.

São o `data` do envelope de sucesso, sem shaping adicional no gateway.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.page import Page, PageContext, PageStatistics, PageSummary, PageVersion
from app.domain.pagination import PaginationInfo
from app.domain.search import SearchResult, SearchStatistics
from app.domain.space import Space, SpaceSummary


class _Response(BaseModel):
    model_config = ConfigDict(frozen=True)


# ──────────────────────────────────────────────────────────────────────────────
# Spaces
# ──────────────────────────────────────────────────────────────────────────────


class GetSpacesResponse(_Response):
    spaces: list[Space] = Field(default_factory=list)
    pagination: PaginationInfo
    summary: SpaceSummary


class SpaceResponse(_Response):
    space: Space


class SpaceMutationResponse(_Response):
    space: Space
    message: str


# ──────────────────────────────────────────────────────────────────────────────
# Pages
# ──────────────────────────────────────────────────────────────────────────────


class GetPageResponse(_Response):
    page: Page
    context: PageContext
    comment_count: int | None = None


class CreatePageResponse(_Response):
    page: Page
    context: PageContext
    message: str


class UpdatePageResponse(_Response):
    page: Page
    context: PageContext
    previous_version: int
    current_version: int
    changes: list[str] = Field(default_factory=list)
    message: str


class DeletePageResponse(_Response):
    page_id: str
    title: str
    message: str


class PageVersionResponse(_Response):
    page_id: str
    title: str
    version: PageVersion


class PagesBySpaceResponse(_Response):
    space_id: str
    pages: list[PageSummary] = Field(default_factory=list)
    pagination: PaginationInfo
    statistics: PageStatistics


class ChildPagesResponse(_Response):
    parent: PageSummary
    pages: list[PageSummary] = Field(default_factory=list)
    pagination: PaginationInfo


# ──────────────────────────────────────────────────────────────────────────────
# Search
# ──────────────────────────────────────────────────────────────────────────────


class SearchPagesResponse(_Response):
    query: str
    cql: str
    pages: list[PageSummary] = Field(default_factory=list)
    pagination: PaginationInfo
    statistics: PageStatistics


class SearchContext(_Response):
    query: str
    cql: str
    space_key: str | None = None
    content_type: str | None = None
    order_by: str = "relevance"
    include_archived_spaces: bool = True


class SearchContentResponse(_Response):
    results: list[SearchResult] = Field(default_factory=list)
    pagination: PaginationInfo
    context: SearchContext
    statistics: SearchStatistics
