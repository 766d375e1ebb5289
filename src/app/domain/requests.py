"""Requests validados das operações Confluence.

Um modelo pydantic por operação. Os argumentos chegam em camelCase
(formato de wire) ou snake_case; strings são aparadas antes das
restrições. Instâncias são imutáveis e só são produzidas pelo gate de
validação (api.validators.confluence).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SPACE_KEY_PATTERN = r"^[A-Z][A-Z0-9]*$"

PageStatusInput = Literal["current", "draft"]
ContentFormat = Literal["storage", "editor", "wiki", "atlas_doc_format"]
SpaceTypeInput = Literal["global", "personal"]
SpaceStatusInput = Literal["current", "archived"]
ContentType = Literal["page", "blogpost", "comment", "attachment"]
OrderBy = Literal["relevance", "created", "modified", "title"]


class OperationRequest(BaseModel):
    """Base comum: imutável, trim de strings, aliases camelCase."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PaginatedRequest(OperationRequest):
    limit: int | None = Field(default=None, ge=1, le=250, description="Máximo de itens (1-250)")
    start: int | None = Field(default=None, ge=0, description="Offset inicial")


# ──────────────────────────────────────────────────────────────────────────────
# Spaces
# ──────────────────────────────────────────────────────────────────────────────


class GetSpacesRequest(PaginatedRequest):
    type: SpaceTypeInput | None = Field(default=None, description="Filtra por tipo de espaço")
    status: SpaceStatusInput | None = Field(default=None, description="Filtra por status")


class GetSpaceByKeyRequest(OperationRequest):
    key: str = Field(..., min_length=1, pattern=SPACE_KEY_PATTERN, description="Chave do espaço")


class GetSpaceByIdRequest(OperationRequest):
    id: str = Field(..., min_length=1, description="ID do espaço")


class CreateSpaceRequest(OperationRequest):
    key: str = Field(..., min_length=1, pattern=SPACE_KEY_PATTERN, description="Chave do espaço")
    name: str = Field(..., min_length=1, max_length=200, description="Nome do espaço")
    description: str | None = Field(default=None, description="Descrição em texto plano")
    type: SpaceTypeInput | None = None


class UpdateSpaceRequest(OperationRequest):
    key: str = Field(..., min_length=1, pattern=SPACE_KEY_PATTERN, description="Chave do espaço")
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    type: SpaceTypeInput | None = None


# ──────────────────────────────────────────────────────────────────────────────
# Pages
# ──────────────────────────────────────────────────────────────────────────────


class GetPageRequest(OperationRequest):
    page_id: str = Field(..., min_length=1, description="ID da página")
    include_content: bool = Field(default=True, description="Inclui o corpo em storage format")
    include_comments: bool = Field(default=False, description="Inclui contagem de comentários")
    expand: str | None = None


class CreatePageRequest(OperationRequest):
    space_id: str = Field(..., min_length=1, description="ID do espaço de destino")
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1, description="Corpo da página")
    parent_page_id: str | None = Field(default=None, min_length=1)
    status: PageStatusInput | None = None
    content_format: ContentFormat | None = None


class UpdatePageRequest(OperationRequest):
    page_id: str = Field(..., min_length=1)
    version_number: int = Field(..., ge=1, description="Versão atual conhecida pelo chamador")
    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    status: PageStatusInput | None = None
    content_format: ContentFormat | None = None
    version_message: str | None = None


class DeletePageRequest(OperationRequest):
    page_id: str = Field(..., min_length=1)


class GetPageVersionRequest(OperationRequest):
    page_id: str = Field(..., min_length=1)


class GetPagesBySpaceRequest(PaginatedRequest):
    space_id: str = Field(..., min_length=1)


class GetChildPagesRequest(PaginatedRequest):
    parent_page_id: str = Field(..., min_length=1)


# ──────────────────────────────────────────────────────────────────────────────
# Search
# ──────────────────────────────────────────────────────────────────────────────


class SearchPagesRequest(PaginatedRequest):
    query: str = Field(..., min_length=1, description="Texto buscado (CQL text ~)")
    space_key: str | None = None
    type: ContentType | None = None
    order_by: OrderBy | None = None


class SearchContentRequest(SearchPagesRequest):
    include_archived_spaces: bool = Field(
        default=True,
        description="False restringe a busca a espaços não arquivados",
    )
