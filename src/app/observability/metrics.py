"""Registro de métricas via structured logging.

As métricas são emitidas como logs estruturados e agregadas depois pelo
coletor de logs do ambiente.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Tool call: counter de chamadas de ferramenta com resultado
- Retry: counter de novas tentativas no transporte HTTP

Uso:
    from app.observability.metrics import record_latency, record_tool_call

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("dispatch", "confluence_get_page", latency_ms, correlation_id)
    record_tool_call("confluence_get_page", success=True)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "dispatch", "confluence_http")
        operation: Nome da operação (ex: "confluence_get_page")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_tool_call(
    tool_name: str,
    success: bool,
    error_code: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado de uma chamada de ferramenta.

    Args:
        tool_name: Nome da operação despachada
        success: Se o envelope retornou sucesso
        error_code: `code` da exceção quando houve falha
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "tool_call",
        "component": "dispatch",
        "operation": tool_name,
        "success": success,
        "correlation_id": correlation_id,
    }
    if error_code:
        extra["error_code"] = error_code

    logger.info("metric_tool_call", extra=extra)


def record_retry(
    endpoint: str,
    attempt: int,
    error_type: str,
    correlation_id: str | None = None,
) -> None:
    """Registra nova tentativa de chamada HTTP.

    Args:
        endpoint: Path chamado (sem query string)
        attempt: Número da tentativa que falhou (1-indexed)
        error_type: Classe da exceção que motivou o retry
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_retry",
        extra={
            "metric_type": "retry",
            "component": "confluence_http",
            "endpoint": endpoint,
            "attempt": attempt,
            "error_type": error_type,
            "correlation_id": correlation_id,
        },
    )
