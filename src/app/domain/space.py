"""Space - entidade de espaço do Confluence."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.pagination import PaginationInfo


class SpaceLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    webui: str = ""
    self_link: str = ""


class Space(BaseModel):
    """Espaço retornado pela API (v1 ou v2)."""

    model_config = ConfigDict(frozen=True)

    id: str
    key: str
    name: str
    description: str | None = None
    type: str = "global"
    status: str = "current"
    created_at: datetime | None = None
    homepage_id: str | None = None
    links: SpaceLinks = Field(default_factory=SpaceLinks)


class SpaceSummary(BaseModel):
    """Contagens por tipo/status de uma listagem de espaços."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    global_spaces: int = 0
    personal_spaces: int = 0
    archived_spaces: int = 0


class SpaceList(BaseModel):
    model_config = ConfigDict(frozen=True)

    spaces: list[Space] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)


def summarize_spaces(spaces: list[Space]) -> SpaceSummary:
    return SpaceSummary(
        total=len(spaces),
        global_spaces=sum(1 for s in spaces if s.type == "global"),
        personal_spaces=sum(1 for s in spaces if s.type == "personal"),
        archived_spaces=sum(1 for s in spaces if s.status == "archived"),
    )
