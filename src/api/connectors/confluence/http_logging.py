"""Helpers de logging do transporte Confluence (sem credenciais)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import TransportError

logger = logging.getLogger(__name__)


def log_request_attempt(method: str, url: str, api_version: str, attempt: int) -> None:
    """Uma linha debug por tentativa."""
    logger.debug(
        "confluence_request_attempt",
        extra={
            "method": method,
            "url": url,
            "api_version": api_version,
            "attempt": attempt,
        },
    )


def log_request_success(method: str, endpoint: str, attempts: int, elapsed_ms: float) -> None:
    logger.debug(
        "confluence_request_succeeded",
        extra={
            "method": method,
            "endpoint": endpoint,
            "attempts": attempts,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_request_failure(
    method: str,
    endpoint: str,
    error: TransportError,
    attempts: int,
    elapsed_ms: float,
) -> None:
    """Loga a falha final do retry sem expor headers ou corpo."""
    logger.warning(
        "confluence_request_failed",
        extra={
            "method": method,
            "endpoint": endpoint,
            "error_type": type(error).__name__,
            "error_code": error.code,
            "status_code": getattr(error, "status_code", None),
            "attempts": attempts,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )
