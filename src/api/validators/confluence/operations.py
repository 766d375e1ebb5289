"""Mapa operação -> modelo de request e entrada única do gate."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.validators.confluence.request_validator import RequestValidator
from app.domain.requests import (
    CreatePageRequest,
    CreateSpaceRequest,
    DeletePageRequest,
    GetChildPagesRequest,
    GetPageRequest,
    GetPagesBySpaceRequest,
    GetPageVersionRequest,
    GetSpaceByIdRequest,
    GetSpaceByKeyRequest,
    GetSpacesRequest,
    OperationRequest,
    SearchContentRequest,
    SearchPagesRequest,
    UpdatePageRequest,
    UpdateSpaceRequest,
)
from utils.errors import RequestValidationError

# Nomes públicos das operações (imutáveis depois de registrados)
GET_SPACES = "confluence_get_spaces"
GET_SPACE_BY_KEY = "confluence_get_space_by_key"
GET_SPACE_BY_ID = "confluence_get_space_by_id"
CREATE_SPACE = "confluence_create_space"
UPDATE_SPACE = "confluence_update_space"
GET_PAGE = "confluence_get_page"
CREATE_PAGE = "confluence_create_page"
UPDATE_PAGE = "confluence_update_page"
DELETE_PAGE = "confluence_delete_page"
GET_PAGE_VERSION = "confluence_get_page_version"
GET_PAGES_BY_SPACE = "confluence_get_pages_by_space"
GET_CHILD_PAGES = "confluence_get_child_pages"
SEARCH_PAGES = "confluence_search_pages"
SEARCH = "confluence_search"

REQUEST_MODELS: dict[str, type[OperationRequest]] = {
    GET_SPACES: GetSpacesRequest,
    GET_SPACE_BY_KEY: GetSpaceByKeyRequest,
    GET_SPACE_BY_ID: GetSpaceByIdRequest,
    CREATE_SPACE: CreateSpaceRequest,
    UPDATE_SPACE: UpdateSpaceRequest,
    GET_PAGE: GetPageRequest,
    CREATE_PAGE: CreatePageRequest,
    UPDATE_PAGE: UpdatePageRequest,
    DELETE_PAGE: DeletePageRequest,
    GET_PAGE_VERSION: GetPageVersionRequest,
    GET_PAGES_BY_SPACE: GetPagesBySpaceRequest,
    GET_CHILD_PAGES: GetChildPagesRequest,
    SEARCH_PAGES: SearchPagesRequest,
    SEARCH: SearchContentRequest,
}

VALIDATORS: dict[str, RequestValidator[Any]] = {
    name: RequestValidator(model) for name, model in REQUEST_MODELS.items()
}


def get_validator(operation_name: str) -> RequestValidator[Any]:
    """Retorna o validator da operação.

    Raises:
        KeyError: Operação desconhecida.
    """
    return VALIDATORS[operation_name]


def validate(operation_name: str, raw_arguments: Mapping[str, Any] | None) -> OperationRequest:
    """Valida argumentos brutos de uma operação registrada.

    Raises:
        RequestValidationError: Operação desconhecida ou argumentos inválidos.
    """
    validator = VALIDATORS.get(operation_name)
    if validator is None:
        raise RequestValidationError(f"Unknown operation: {operation_name}")
    return validator.validate(raw_arguments)
