"""Implementações de repositório sobre a API Confluence."""

from app.infra.confluence.page_repository import COMMENT_COUNT_FALLBACK, ConfluencePageRepository
from app.infra.confluence.search_repository import ConfluenceSearchRepository
from app.infra.confluence.space_repository import ConfluenceSpaceRepository

__all__ = [
    "COMMENT_COUNT_FALLBACK",
    "ConfluencePageRepository",
    "ConfluenceSearchRepository",
    "ConfluenceSpaceRepository",
]
