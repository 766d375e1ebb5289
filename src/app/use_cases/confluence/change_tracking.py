"""Descrição das mudanças de um update de página (informativo)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.page import Page
    from app.domain.requests import UpdatePageRequest


def diff_page_changes(existing: Page, request: UpdatePageRequest) -> list[str]:
    """Lista legível do que o request altera em relação à página atual.

    Função pura: nunca decide se o update é persistido.
    """
    changes: list[str] = []

    if request.title is not None and request.title != existing.title:
        changes.append(f'Title changed from "{existing.title}" to "{request.title}"')

    if request.content is not None and request.content != existing.content:
        changes.append("Content updated")

    if request.status is not None and request.status != existing.status:
        changes.append(f'Status changed from "{existing.status}" to "{request.status}"')

    return changes
