"""Resultados de busca CQL e estatísticas derivadas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.pagination import PaginationInfo


class SearchResultContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    status: str = "current"
    title: str
    space_id: str | None = None
    space_key: str | None = None
    space_name: str | None = None
    author_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version_number: int | None = None
    webui: str = ""


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: SearchResultContent
    excerpt: str | None = None
    score: float = 0.0


class SearchResultList(BaseModel):
    model_config = ConfigDict(frozen=True)

    results: list[SearchResult] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)


class ResultsByType(BaseModel):
    model_config = ConfigDict(frozen=True)

    pages: int = 0
    blogposts: int = 0
    comments: int = 0
    attachments: int = 0


class SpaceResultCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    space_key: str
    space_name: str
    count: int


class SearchStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_results: int = 0
    results_by_type: ResultsByType = Field(default_factory=ResultsByType)
    results_by_space: list[SpaceResultCount] = Field(default_factory=list)


def compute_search_statistics(
    results: list[SearchResult],
    total: int | None = None,
) -> SearchStatistics:
    """Agrega resultados por tipo de conteúdo e por espaço (ordem de aparição)."""
    by_space: dict[str, SpaceResultCount] = {}
    for result in results:
        key = result.content.space_key
        if not key:
            continue
        current = by_space.get(key)
        by_space[key] = SpaceResultCount(
            space_key=key,
            space_name=current.space_name if current else (result.content.space_name or key),
            count=(current.count if current else 0) + 1,
        )

    def _count(content_type: str) -> int:
        return sum(1 for r in results if r.content.type == content_type)

    return SearchStatistics(
        total_results=total if total is not None else len(results),
        results_by_type=ResultsByType(
            pages=_count("page"),
            blogposts=_count("blogpost"),
            comments=_count("comment"),
            attachments=_count("attachment"),
        ),
        results_by_space=list(by_space.values()),
    )
