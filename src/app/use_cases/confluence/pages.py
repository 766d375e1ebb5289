"""Use cases de páginas Confluence.

Cada operação mutante faz uma checagem explícita de estado antes de
delegar ao repositório:
- create: título livre no espaço e pai existente
- update: página existente, versão igual à atual, título livre
- delete: página existente

Get, create e update anexam o PageContext; sem `context_builder` o
contexto é o simplificado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.page import compute_page_statistics, summarize_page
from app.domain.responses import (
    ChildPagesResponse,
    CreatePageResponse,
    DeletePageResponse,
    GetPageResponse,
    PagesBySpaceResponse,
    PageVersionResponse,
    UpdatePageResponse,
)
from app.domain.value_objects import PageId, PageTitle
from app.use_cases.confluence._errors import operation_errors
from app.use_cases.confluence.change_tracking import diff_page_changes
from app.use_cases.confluence.page_context import PageContextBuilder, resolve_page_context
from utils.errors import PageNotFoundError, PageTitleConflictError, VersionConflictError

if TYPE_CHECKING:
    from app.domain.page import Page
    from app.domain.requests import (
        CreatePageRequest,
        DeletePageRequest,
        GetChildPagesRequest,
        GetPageRequest,
        GetPagesBySpaceRequest,
        GetPageVersionRequest,
        UpdatePageRequest,
    )
    from app.protocols.page_repository import PageRepositoryProtocol

logger = logging.getLogger(__name__)


async def _require_page(
    pages: PageRepositoryProtocol,
    page_id: PageId,
    *,
    include_content: bool = False,
    expand: str | None = None,
) -> Page:
    page = await pages.find_by_id(page_id, include_content=include_content, expand=expand)
    if page is None:
        raise PageNotFoundError(page_id.value)
    return page


class GetPageUseCase:
    """Busca página por ID, opcionalmente com contagem de comentários."""

    def __init__(
        self,
        page_repository: PageRepositoryProtocol,
        context_builder: PageContextBuilder | None = None,
    ) -> None:
        self._pages = page_repository
        self._context_builder = context_builder

    async def execute(self, request: GetPageRequest) -> GetPageResponse:
        with operation_errors("retrieve page"):
            page_id = PageId.from_string(request.page_id)
            page = await _require_page(
                self._pages,
                page_id,
                include_content=request.include_content,
                expand=request.expand,
            )
            comment_count = None
            if request.include_comments:
                comment_count = await self._pages.get_comment_count(page_id)
            return GetPageResponse(
                page=page,
                context=await resolve_page_context(self._context_builder, page),
                comment_count=comment_count,
            )


class CreatePageUseCase:
    def __init__(
        self,
        page_repository: PageRepositoryProtocol,
        context_builder: PageContextBuilder | None = None,
    ) -> None:
        self._pages = page_repository
        self._context_builder = context_builder

    async def execute(self, request: CreatePageRequest) -> CreatePageResponse:
        with operation_errors("create page"):
            title = PageTitle.from_string(request.title)
            if await self._pages.find_by_title(request.space_id, title) is not None:
                raise PageTitleConflictError(title.value)

            if request.parent_page_id:
                parent_id = PageId.from_string(request.parent_page_id)
                if not await self._pages.exists(parent_id):
                    raise PageNotFoundError(parent_id.value)

            page = await self._pages.create(request)
            return CreatePageResponse(
                page=page,
                context=await resolve_page_context(self._context_builder, page),
                message=f'Page "{page.title}" created successfully',
            )


class UpdatePageUseCase:
    """Update com concorrência otimista.

    O request só é aceito se `version_number` for igual à versão atual;
    em caso de sucesso a página passa para a versão atual + 1.
    """

    def __init__(
        self,
        page_repository: PageRepositoryProtocol,
        context_builder: PageContextBuilder | None = None,
    ) -> None:
        self._pages = page_repository
        self._context_builder = context_builder

    async def execute(self, request: UpdatePageRequest) -> UpdatePageResponse:
        with operation_errors("update page"):
            page_id = PageId.from_string(request.page_id)
            existing = await _require_page(self._pages, page_id, include_content=True)

            current_version = existing.version.number
            if request.version_number != current_version:
                raise VersionConflictError(current_version, request.version_number)

            await self._ensure_title_available(existing, request)

            changes = diff_page_changes(existing, request)
            updated = await self._pages.update(existing, request)

            logger.info(
                "page_update_applied",
                extra={
                    "page_id": page_id.value,
                    "previous_version": current_version,
                    "current_version": updated.version.number,
                    "changes_count": len(changes),
                },
            )
            return UpdatePageResponse(
                page=updated,
                context=await resolve_page_context(self._context_builder, updated),
                previous_version=current_version,
                current_version=updated.version.number,
                changes=changes,
                message=f'Page "{updated.title}" updated successfully',
            )

    async def _ensure_title_available(self, existing: Page, request: UpdatePageRequest) -> None:
        if request.title is None or request.title == existing.title:
            return
        title = PageTitle.from_string(request.title)
        holder = await self._pages.find_by_title(existing.space_id, title)
        if holder is not None and holder.id != existing.id:
            raise PageTitleConflictError(title.value)


class DeletePageUseCase:
    def __init__(self, page_repository: PageRepositoryProtocol) -> None:
        self._pages = page_repository

    async def execute(self, request: DeletePageRequest) -> DeletePageResponse:
        with operation_errors("delete page"):
            page_id = PageId.from_string(request.page_id)
            existing = await _require_page(self._pages, page_id)
            await self._pages.delete(page_id)
            return DeletePageResponse(
                page_id=existing.id,
                title=existing.title,
                message=f'Page "{existing.title}" deleted successfully',
            )


class GetPageVersionUseCase:
    def __init__(self, page_repository: PageRepositoryProtocol) -> None:
        self._pages = page_repository

    async def execute(self, request: GetPageVersionRequest) -> PageVersionResponse:
        with operation_errors("retrieve page version"):
            page_id = PageId.from_string(request.page_id)
            page = await _require_page(self._pages, page_id)
            return PageVersionResponse(page_id=page.id, title=page.title, version=page.version)


class GetPagesBySpaceUseCase:
    def __init__(self, page_repository: PageRepositoryProtocol) -> None:
        self._pages = page_repository

    async def execute(self, request: GetPagesBySpaceRequest) -> PagesBySpaceResponse:
        with operation_errors("retrieve pages by space"):
            result = await self._pages.find_by_space_id(
                request.space_id,
                limit=request.limit,
                start=request.start,
            )
            return PagesBySpaceResponse(
                space_id=request.space_id,
                pages=result.pages,
                pagination=result.pagination,
                statistics=compute_page_statistics(result.pages),
            )


class GetChildPagesUseCase:
    """Lista filhas diretas; o pai precisa existir."""

    def __init__(self, page_repository: PageRepositoryProtocol) -> None:
        self._pages = page_repository

    async def execute(self, request: GetChildPagesRequest) -> ChildPagesResponse:
        with operation_errors("retrieve child pages"):
            parent_id = PageId.from_string(request.parent_page_id)
            parent = await _require_page(self._pages, parent_id)
            result = await self._pages.find_children(
                parent_id,
                limit=request.limit,
                start=request.start,
            )
            return ChildPagesResponse(
                parent=summarize_page(parent),
                pages=result.pages,
                pagination=result.pagination,
            )
