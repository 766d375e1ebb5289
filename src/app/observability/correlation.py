"""Gerenciamento de correlation_id por chamada de ferramenta.

Cada despacho recebe um correlation_id, injetado em todos os logs emitidos
durante a chamada (gateway, use case, repositório, transporte HTTP).
Usa ContextVar para ser async-safe.

Uso:
    from app.observability import get_correlation_id, set_correlation_id

    token = set_correlation_id()
    try:
        ...  # despachar operação
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4 em hex curto)."""
    return uuid.uuid4().hex[:16]
