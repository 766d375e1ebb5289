"""Protocolo do repositório de espaços."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.requests import CreateSpaceRequest, GetSpacesRequest, UpdateSpaceRequest
    from app.domain.space import Space, SpaceList
    from app.domain.value_objects import SpaceKey


class SpaceRepositoryProtocol(Protocol):
    """Contrato para acesso a espaços."""

    async def find_all(self, request: GetSpacesRequest) -> SpaceList:
        """Lista espaços com filtros e paginação."""
        ...

    async def find_by_key(self, key: SpaceKey) -> Space | None:
        """Busca espaço pela chave."""
        ...

    async def find_by_id(self, space_id: str) -> Space | None:
        """Busca espaço pelo ID numérico."""
        ...

    async def create(self, request: CreateSpaceRequest) -> Space:
        """Cria espaço."""
        ...

    async def update(self, existing: Space, request: UpdateSpaceRequest) -> Space:
        """Atualiza nome/descrição/tipo de um espaço existente."""
        ...

    async def exists(self, key: SpaceKey) -> bool:
        """True se a chave já está em uso."""
        ...
