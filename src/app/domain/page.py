"""Page - entidade de página/blogpost do Confluence.

Campos de identidade ficam como string; a validação de formato acontece
nos value objects (app.domain.value_objects) na borda do use case.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.domain.pagination import PaginationInfo

PageStatus = Literal["current", "draft", "trashed", "deleted", "archived"]
PageType = Literal["page", "blogpost"]
ContentFormat = Literal["storage", "editor", "wiki", "atlas_doc_format"]


class PageVersion(BaseModel):
    """Versão corrente da página (concorrência otimista)."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1)
    message: str | None = None
    created_at: datetime | None = None
    author_id: str | None = None


class PageLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    webui: str = ""
    self_link: str = ""
    editui: str = ""
    tinyui: str | None = None


class PageBody(BaseModel):
    """Conteúdo da página em uma representação."""

    model_config = ConfigDict(frozen=True)

    value: str
    representation: str = "storage"


class Page(BaseModel):
    """Página completa retornada pela API."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "page"
    status: str = "current"
    title: str
    space_id: str = ""
    parent_id: str | None = None
    author_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: PageVersion
    body: PageBody | None = None
    links: PageLinks = Field(default_factory=PageLinks)
    labels: list[str] = Field(default_factory=list)

    @property
    def content(self) -> str | None:
        return self.body.value if self.body else None


class PageSummary(BaseModel):
    """Visão resumida para listagens e buscas."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    status: str = "current"
    type: str = "page"
    space_id: str = ""
    author_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version_number: int | None = None
    webui: str = ""


class PageStatistics(BaseModel):
    """Contagens por status/tipo de um conjunto de páginas."""

    model_config = ConfigDict(frozen=True)

    total_pages: int = 0
    current_pages: int = 0
    draft_pages: int = 0
    trashed_pages: int = 0
    blog_posts: int = 0


class PageList(BaseModel):
    """Resultado de listagem do repositório."""

    model_config = ConfigDict(frozen=True)

    pages: list[PageSummary] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)


def summarize_page(page: Page) -> PageSummary:
    return PageSummary(
        id=page.id,
        title=page.title,
        status=page.status,
        type=page.type,
        space_id=page.space_id,
        author_id=page.author_id,
        created_at=page.created_at,
        updated_at=page.updated_at,
        version_number=page.version.number,
        webui=page.links.webui,
    )


def compute_page_statistics(pages: list[PageSummary]) -> PageStatistics:
    return PageStatistics(
        total_pages=len(pages),
        current_pages=sum(1 for p in pages if p.status == "current"),
        draft_pages=sum(1 for p in pages if p.status == "draft"),
        trashed_pages=sum(1 for p in pages if p.status == "trashed"),
        blog_posts=sum(1 for p in pages if p.type == "blogpost"),
    )


class PageBreadcrumb(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    webui: str = ""


class PageContextSpace(BaseModel):
    """Resumo do espaço dono da página."""

    model_config = ConfigDict(frozen=True)

    id: str
    key: str = ""
    name: str = ""
    type: str = "global"
    webui: str = ""


class PageContext(BaseModel):
    """Contexto de navegação devolvido junto com a página."""

    model_config = ConfigDict(frozen=True)

    space: PageContextSpace
    breadcrumbs: list[PageBreadcrumb] = Field(default_factory=list)
    children: list[PageSummary] = Field(default_factory=list)


def build_page_breadcrumbs(page: Page) -> list[PageBreadcrumb]:
    """Por enquanto só a própria página; ancestrais não são buscados."""
    return [PageBreadcrumb(id=page.id, title=page.title, webui=page.links.webui)]


def build_simplified_page_context(page: Page) -> PageContext:
    """Contexto sem IO: espaço só com o ID e nenhuma filha."""
    return PageContext(
        space=PageContextSpace(id=page.space_id, webui=f"/spaces/{page.space_id}"),
        breadcrumbs=build_page_breadcrumbs(page),
    )
