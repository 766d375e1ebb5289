"""Protocolo do repositório de busca CQL."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.requests import SearchContentRequest
    from app.domain.search import SearchResultList


class SearchRepositoryProtocol(Protocol):
    """Contrato para busca de conteúdo."""

    async def search_content(self, request: SearchContentRequest) -> tuple[SearchResultList, str]:
        """Executa a busca; devolve resultados e a query CQL usada."""
        ...
