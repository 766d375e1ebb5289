"""Protocolo do repositório de páginas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.page import Page, PageList, PageVersion
    from app.domain.requests import CreatePageRequest, SearchPagesRequest, UpdatePageRequest
    from app.domain.value_objects import PageId, PageTitle


class PageRepositoryProtocol(Protocol):
    """Contrato para acesso a páginas.

    `find_*` devolvem None quando a página não existe; qualquer outra
    falha propaga.
    """

    async def find_by_id(
        self,
        page_id: PageId,
        *,
        include_content: bool = True,
        expand: str | None = None,
    ) -> Page | None:
        """Busca página por ID."""
        ...

    async def find_by_title(self, space_id: str, title: PageTitle) -> Page | None:
        """Busca página pelo título exato dentro de um espaço."""
        ...

    async def find_by_space_id(
        self,
        space_id: str,
        *,
        limit: int | None = None,
        start: int | None = None,
    ) -> PageList:
        """Lista páginas de um espaço."""
        ...

    async def find_children(
        self,
        parent_id: PageId,
        *,
        limit: int | None = None,
        start: int | None = None,
    ) -> PageList:
        """Lista filhas diretas de uma página."""
        ...

    async def search(self, request: SearchPagesRequest) -> tuple[PageList, str]:
        """Busca páginas via CQL; devolve resultado e a query CQL usada."""
        ...

    async def create(self, request: CreatePageRequest) -> Page:
        """Cria página."""
        ...

    async def update(self, existing: Page, request: UpdatePageRequest) -> Page:
        """Persiste update; a versão enviada é a atual + 1."""
        ...

    async def delete(self, page_id: PageId) -> None:
        """Remove página."""
        ...

    async def exists(self, page_id: PageId) -> bool:
        """True se a página existe."""
        ...

    async def get_version(self, page_id: PageId) -> PageVersion | None:
        """Versão corrente (None se a página não existe)."""
        ...

    async def get_comment_count(self, page_id: PageId) -> int:
        """Quantidade de comentários; 404 vira 0."""
        ...
