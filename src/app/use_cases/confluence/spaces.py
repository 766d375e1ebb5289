"""Use cases de espaços Confluence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.responses import GetSpacesResponse, SpaceMutationResponse, SpaceResponse
from app.domain.space import summarize_spaces
from app.domain.value_objects import SpaceKey, SpaceName
from app.use_cases.confluence._errors import operation_errors
from utils.errors import SpaceAlreadyExistsError, SpaceNotFoundError

if TYPE_CHECKING:
    from app.domain.requests import (
        CreateSpaceRequest,
        GetSpaceByIdRequest,
        GetSpaceByKeyRequest,
        GetSpacesRequest,
        UpdateSpaceRequest,
    )
    from app.protocols.space_repository import SpaceRepositoryProtocol


class GetSpacesUseCase:
    """Lista espaços com resumo por tipo/status."""

    def __init__(self, space_repository: SpaceRepositoryProtocol) -> None:
        self._spaces = space_repository

    async def execute(self, request: GetSpacesRequest) -> GetSpacesResponse:
        with operation_errors("retrieve spaces"):
            result = await self._spaces.find_all(request)
            return GetSpacesResponse(
                spaces=result.spaces,
                pagination=result.pagination,
                summary=summarize_spaces(result.spaces),
            )


class GetSpaceByKeyUseCase:
    def __init__(self, space_repository: SpaceRepositoryProtocol) -> None:
        self._spaces = space_repository

    async def execute(self, request: GetSpaceByKeyRequest) -> SpaceResponse:
        with operation_errors("retrieve space"):
            key = SpaceKey.from_string(request.key)
            space = await self._spaces.find_by_key(key)
            if space is None:
                raise SpaceNotFoundError(key.value)
            return SpaceResponse(space=space)


class GetSpaceByIdUseCase:
    def __init__(self, space_repository: SpaceRepositoryProtocol) -> None:
        self._spaces = space_repository

    async def execute(self, request: GetSpaceByIdRequest) -> SpaceResponse:
        with operation_errors("retrieve space"):
            space = await self._spaces.find_by_id(request.id)
            if space is None:
                raise SpaceNotFoundError(request.id)
            return SpaceResponse(space=space)


class CreateSpaceUseCase:
    """Cria espaço garantindo que a chave ainda não existe.

    Se a chave já está em uso, `create` nunca é chamado.
    """

    def __init__(self, space_repository: SpaceRepositoryProtocol) -> None:
        self._spaces = space_repository

    async def execute(self, request: CreateSpaceRequest) -> SpaceMutationResponse:
        with operation_errors("create space"):
            key = SpaceKey.from_string(request.key)
            SpaceName.from_string(request.name)

            if await self._spaces.find_by_key(key) is not None:
                raise SpaceAlreadyExistsError(key.value)

            space = await self._spaces.create(request)
            return SpaceMutationResponse(
                space=space,
                message=f"Space '{space.name}' created successfully",
            )


class UpdateSpaceUseCase:
    def __init__(self, space_repository: SpaceRepositoryProtocol) -> None:
        self._spaces = space_repository

    async def execute(self, request: UpdateSpaceRequest) -> SpaceMutationResponse:
        with operation_errors("update space"):
            key = SpaceKey.from_string(request.key)
            if request.name is not None:
                SpaceName.from_string(request.name)

            existing = await self._spaces.find_by_key(key)
            if existing is None:
                raise SpaceNotFoundError(key.value)

            space = await self._spaces.update(existing, request)
            return SpaceMutationResponse(
                space=space,
                message=f"Space '{space.name}' updated successfully",
            )
