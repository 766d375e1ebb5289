"""Informação de paginação comum às listagens."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PaginationInfo(BaseModel):
    """Janela retornada por uma listagem paginada."""

    model_config = ConfigDict(frozen=True)

    start: int = 0
    limit: int = 25
    size: int = 0
    has_more: bool = False
    total: int | None = None
