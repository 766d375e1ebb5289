"""Catálogo das operações Confluence expostas pelo gateway."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.tools.registry import ToolDefinition
from api.validators.confluence import operations as ops
from api.validators.confluence.operations import get_validator

if TYPE_CHECKING:
    from app.use_cases.confluence import (
        CreatePageUseCase,
        CreateSpaceUseCase,
        DeletePageUseCase,
        GetChildPagesUseCase,
        GetPagesBySpaceUseCase,
        GetPageUseCase,
        GetPageVersionUseCase,
        GetSpaceByIdUseCase,
        GetSpaceByKeyUseCase,
        GetSpacesUseCase,
        SearchContentUseCase,
        SearchPagesUseCase,
        UpdatePageUseCase,
        UpdateSpaceUseCase,
    )


@dataclass(frozen=True)
class ConfluenceUseCases:
    """Use cases já ligados aos repositórios (montados no bootstrap)."""

    get_spaces: GetSpacesUseCase
    get_space_by_key: GetSpaceByKeyUseCase
    get_space_by_id: GetSpaceByIdUseCase
    create_space: CreateSpaceUseCase
    update_space: UpdateSpaceUseCase
    get_page: GetPageUseCase
    create_page: CreatePageUseCase
    update_page: UpdatePageUseCase
    delete_page: DeletePageUseCase
    get_page_version: GetPageVersionUseCase
    get_pages_by_space: GetPagesBySpaceUseCase
    get_child_pages: GetChildPagesUseCase
    search_pages: SearchPagesUseCase
    search: SearchContentUseCase


def build_tool_definitions(use_cases: ConfluenceUseCases) -> list[ToolDefinition]:
    """Uma ToolDefinition por operação, na ordem de listagem."""
    entries = [
        (ops.GET_SPACES, "List accessible Confluence spaces", use_cases.get_spaces),
        (ops.GET_SPACE_BY_KEY, "Get specific space by key", use_cases.get_space_by_key),
        (ops.GET_SPACE_BY_ID, "Get specific space by ID", use_cases.get_space_by_id),
        (
            ops.CREATE_SPACE,
            "Create a new space; fails if the key is already in use",
            use_cases.create_space,
        ),
        (ops.UPDATE_SPACE, "Update name, description or type of a space", use_cases.update_space),
        (ops.GET_PAGE, "Get detailed information about a specific page", use_cases.get_page),
        (ops.CREATE_PAGE, "Create a new page in Confluence", use_cases.create_page),
        (
            ops.UPDATE_PAGE,
            "Update an existing page in Confluence; versionNumber must match the current version",
            use_cases.update_page,
        ),
        (ops.DELETE_PAGE, "Delete a page by ID", use_cases.delete_page),
        (ops.GET_PAGE_VERSION, "Get the current version of a page", use_cases.get_page_version),
        (ops.GET_PAGES_BY_SPACE, "List pages in a specific space", use_cases.get_pages_by_space),
        (ops.GET_CHILD_PAGES, "Get child pages of a parent page", use_cases.get_child_pages),
        (
            ops.SEARCH_PAGES,
            "Search pages and blog posts with a text query (CQL)",
            use_cases.search_pages,
        ),
        (
            ops.SEARCH,
            "Search any Confluence content (pages, blog posts, comments, attachments) "
            "with filters by space, type and ordering",
            use_cases.search,
        ),
    ]
    return [
        ToolDefinition(
            name=name,
            description=description,
            validator=get_validator(name),
            handler=use_case.execute,
        )
        for name, description, use_case in entries
    ]
