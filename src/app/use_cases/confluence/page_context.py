"""Montagem do contexto de navegação de uma página.

O contexto completo traz o espaço real e as primeiras filhas. Se qualquer
consulta falhar, a resposta segue com o contexto simplificado (fallback
logado); a operação principal nunca falha por causa do contexto.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.page import (
    PageContext,
    PageContextSpace,
    build_page_breadcrumbs,
    build_simplified_page_context,
)
from app.domain.value_objects import PageId
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.page import Page
    from app.protocols.page_repository import PageRepositoryProtocol
    from app.protocols.space_repository import SpaceRepositoryProtocol

logger = logging.getLogger(__name__)

CONTEXT_CHILDREN_LIMIT = 10


class PageContextBuilder:
    """Constrói PageContext a partir dos repositórios de espaço e página."""

    def __init__(
        self,
        space_repository: SpaceRepositoryProtocol,
        page_repository: PageRepositoryProtocol,
    ) -> None:
        self._spaces = space_repository
        self._pages = page_repository

    async def build(self, page: Page) -> PageContext:
        started = time.perf_counter()
        try:
            space = await self._spaces.find_by_id(page.space_id)
            children = await self._pages.find_children(
                PageId.from_string(page.id),
                limit=CONTEXT_CHILDREN_LIMIT,
            )
        except Exception as exc:
            log_fallback(
                logger,
                "page_context",
                reason=type(exc).__name__,
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )
            return build_simplified_page_context(page)

        if space is None:
            context_space = PageContextSpace(id=page.space_id, webui=f"/spaces/{page.space_id}")
        else:
            context_space = PageContextSpace(
                id=page.space_id,
                key=space.key,
                name=space.name,
                type=space.type,
                webui=space.links.webui or f"/spaces/{page.space_id}",
            )
        return PageContext(
            space=context_space,
            breadcrumbs=build_page_breadcrumbs(page),
            children=children.pages,
        )


async def resolve_page_context(builder: PageContextBuilder | None, page: Page) -> PageContext:
    """Sem builder configurado, usa o contexto simplificado."""
    if builder is None:
        return build_simplified_page_context(page)
    return await builder.build(page)
