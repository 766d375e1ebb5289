"""Dispatch gateway: nome da operação + argumentos brutos -> envelope.

Único ponto do sistema onde exceções param de propagar e viram dados.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from api.tools.envelope import ToolEnvelope
from api.validators.confluence.request_validator import RequestValidator
from app.observability import (
    get_correlation_id,
    record_latency,
    record_tool_call,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

RequestHandler = Callable[[Any], Awaitable[Any]]
EnvelopeHandler = Callable[[Mapping[str, Any] | None], Awaitable[ToolEnvelope]]


@dataclass(frozen=True)
class ToolDefinition:
    """Par (validator, handler) associado a um nome de operação."""

    name: str
    description: str
    validator: RequestValidator[Any]
    handler: RequestHandler


@dataclass(frozen=True)
class ToolRegistration:
    """Superfície exposta ao servidor de protocolo externo."""

    name: str
    description: str
    input_schema: dict[str, Any]
    handler: EnvelopeHandler


class DispatchGateway:
    """Registra operações e despacha chamadas.

    `handle` nunca levanta: operação desconhecida, falha de validação e
    erro do handler viram envelope de erro com a mensagem original.
    """

    def __init__(self, definitions: Iterable[ToolDefinition] = ()) -> None:
        self._definitions: dict[str, ToolDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        """Registra operação; nomes são únicos e imutáveis.

        Raises:
            ValueError: Nome já registrado.
        """
        if definition.name in self._definitions:
            raise ValueError(f"Operation already registered: {definition.name}")
        self._definitions[definition.name] = definition
        logger.info("tool_registered", extra={"tool_name": definition.name})

    @property
    def operation_names(self) -> list[str]:
        return list(self._definitions)

    def get_definition(self, name: str) -> ToolDefinition | None:
        return self._definitions.get(name)

    def registrations(self) -> list[ToolRegistration]:
        """Uma ToolRegistration por operação, com handler já ligado ao gateway."""
        return [
            ToolRegistration(
                name=definition.name,
                description=definition.description,
                input_schema=definition.validator.input_schema(),
                handler=partial(self.handle, definition.name),
            )
            for definition in self._definitions.values()
        ]

    async def handle(
        self,
        operation_name: str,
        raw_arguments: Mapping[str, Any] | None = None,
    ) -> ToolEnvelope:
        """Valida, executa e empacota o resultado de uma operação."""
        token = set_correlation_id()
        started = time.perf_counter()
        try:
            envelope, error_code = await self._dispatch(operation_name, raw_arguments)
            latency_ms = (time.perf_counter() - started) * 1000
            self._log_call(operation_name, envelope, error_code, latency_ms)
            return envelope
        finally:
            reset_correlation_id(token)

    async def _dispatch(
        self,
        operation_name: str,
        raw_arguments: Mapping[str, Any] | None,
    ) -> tuple[ToolEnvelope, str | None]:
        definition = self._definitions.get(operation_name)
        if definition is None:
            return ToolEnvelope.failure(f"Unknown operation: {operation_name}"), "UNKNOWN_OPERATION"

        try:
            request = definition.validator.validate(raw_arguments)
            data = await definition.handler(request)
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            return ToolEnvelope.failure(message), getattr(exc, "code", type(exc).__name__)
        return ToolEnvelope.ok(data), None

    def _log_call(
        self,
        operation_name: str,
        envelope: ToolEnvelope,
        error_code: str | None,
        latency_ms: float,
    ) -> None:
        correlation_id = get_correlation_id()
        if envelope.success:
            logger.info(
                "tool_call_succeeded",
                extra={"tool_name": operation_name, "latency_ms": round(latency_ms, 2)},
            )
        else:
            logger.warning(
                "tool_call_failed",
                extra={
                    "tool_name": operation_name,
                    "error_code": error_code,
                    "latency_ms": round(latency_ms, 2),
                },
            )
        record_latency("dispatch", operation_name, latency_ms, correlation_id)
        record_tool_call(operation_name, envelope.success, error_code, correlation_id)
