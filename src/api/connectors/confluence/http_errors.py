"""Parsing e classificação de respostas de erro da API Confluence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import AuthenticationError, HttpStatusError

if TYPE_CHECKING:
    import httpx

# Status que indicam credencial rejeitada ou sem permissão
AUTH_FAILURE_STATUSES = frozenset({401, 403})

# Campos do corpo JSON consultados, em ordem, para a mensagem de erro
_MESSAGE_FIELDS = ("message", "detail", "error")


def extract_error_message(response: httpx.Response) -> str:
    """Extrai mensagem legível do corpo de erro (best-effort).

    Tenta `message`, `detail` e `error` do JSON; se nenhum existir ou o
    corpo não for JSON, usa "HTTP <status>: <reason>".
    """
    fallback = f"HTTP {response.status_code}: {response.reason_phrase}"
    try:
        body = response.json()
    except ValueError:
        return fallback

    if not isinstance(body, dict):
        return fallback

    for key in _MESSAGE_FIELDS:
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
        # v2 às vezes devolve {"errors": [...]} ou error como objeto
        if isinstance(value, dict) and isinstance(value.get("message"), str):
            return value["message"]

    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        title = errors[0].get("title") or errors[0].get("detail")
        if isinstance(title, str) and title:
            return title

    return fallback


def classify_status_error(message: str, status_code: int, endpoint: str) -> HttpStatusError:
    """Escolhe a subclasse de HttpStatusError adequada ao status."""
    if status_code in AUTH_FAILURE_STATUSES:
        return AuthenticationError(message, status_code, endpoint)
    return HttpStatusError(message, status_code, endpoint)


def is_not_found(error: BaseException) -> bool:
    """True se `error` é um HttpStatusError com status 404."""
    return isinstance(error, HttpStatusError) and error.is_not_found
