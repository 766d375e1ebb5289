"""Use cases específicos de Confluence."""

from .change_tracking import diff_page_changes
from .page_context import PageContextBuilder
from .pages import (
    CreatePageUseCase,
    DeletePageUseCase,
    GetChildPagesUseCase,
    GetPagesBySpaceUseCase,
    GetPageUseCase,
    GetPageVersionUseCase,
    UpdatePageUseCase,
)
from .search import SearchContentUseCase, SearchPagesUseCase
from .spaces import (
    CreateSpaceUseCase,
    GetSpaceByIdUseCase,
    GetSpaceByKeyUseCase,
    GetSpacesUseCase,
    UpdateSpaceUseCase,
)

__all__ = [
    # Pages
    "CreatePageUseCase",
    "DeletePageUseCase",
    "GetChildPagesUseCase",
    "GetPageUseCase",
    "GetPageVersionUseCase",
    "GetPagesBySpaceUseCase",
    "PageContextBuilder",
    "UpdatePageUseCase",
    "diff_page_changes",
    # Search
    "SearchContentUseCase",
    "SearchPagesUseCase",
    # Spaces
    "CreateSpaceUseCase",
    "GetSpaceByIdUseCase",
    "GetSpaceByKeyUseCase",
    "GetSpacesUseCase",
    "UpdateSpaceUseCase",
]
