"""Disciplina de wrapping de erros dos use cases Confluence."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from utils.errors import DomainError, DomainOperationError, ValidationError

logger = logging.getLogger(__name__)

# Resultados esperados: atravessam o use case sem wrapping
PASSTHROUGH_ERRORS: tuple[type[Exception], ...] = (DomainError, ValidationError)


@contextmanager
def operation_errors(action: str) -> Iterator[None]:
    """Converte falhas inesperadas em DomainOperationError.

    Erros de domínio (not found, conflito, já existe) e de validação
    propagam intactos; o resto vira "Failed to <action>: <mensagem>".
    """
    try:
        yield
    except PASSTHROUGH_ERRORS:
        raise
    except Exception as exc:
        logger.warning(
            "use_case_operation_failed",
            extra={"action": action, "error_type": type(exc).__name__},
        )
        raise DomainOperationError(f"Failed to {action}: {exc}", action=action) from exc
