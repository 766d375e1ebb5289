"""Gate de validação: argumentos brutos -> request tipado e imutável.

Puro e síncrono. A mensagem do erro traz só a primeira falha
("<campo>: <motivo>"); a lista completa fica em `errors`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from app.domain.requests import OperationRequest
from utils.errors import RequestValidationError

RequestT = TypeVar("RequestT", bound=OperationRequest)


def format_first_error(errors: list[dict[str, Any]]) -> str:
    """Formata o primeiro erro do pydantic como "<campo>: <motivo>"."""
    if not errors:
        return "Invalid arguments"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "arguments"
    return f"{field}: {first.get('msg', 'invalid value')}"


class RequestValidator(Generic[RequestT]):
    """Valida argumentos de uma operação contra seu modelo pydantic."""

    def __init__(self, model: type[RequestT]) -> None:
        self._model = model

    @property
    def model(self) -> type[RequestT]:
        return self._model

    def input_schema(self) -> dict[str, Any]:
        """JSON schema (camelCase) exposto aos clientes da operação."""
        return self._model.model_json_schema(by_alias=True)

    def validate(self, raw_arguments: Mapping[str, Any] | None) -> RequestT:
        """Converte argumentos brutos em request validado.

        Raises:
            RequestValidationError: Primeira falha na mensagem, todas em `errors`.
        """
        if raw_arguments is None:
            raw_arguments = {}
        if not isinstance(raw_arguments, Mapping):
            raise RequestValidationError(
                "arguments: Input should be an object",
                errors=[{"loc": ("arguments",), "msg": "Input should be an object"}],
            )

        try:
            return self._model.model_validate(dict(raw_arguments))
        except PydanticValidationError as exc:
            errors = [dict(err) for err in exc.errors(include_url=False, include_context=False)]
            raise RequestValidationError(format_first_error(errors), errors=errors) from exc
