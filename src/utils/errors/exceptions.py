"""Hierarquia de exceções do gateway Confluence.

Camadas:
- Transporte: falhas de rede, timeout, status HTTP e parse de resposta
- Configuração: settings ausentes ou inválidas
- Validação: entrada fora do contrato (schema ou value object)
- Domínio: resultados de negócio esperados (not found, conflito, já existe)
- Operação: wrapper genérico para falhas de causa desconhecida

Todas carregam `code` estável para consumo por adapters.
"""

from __future__ import annotations

from typing import Any


class ConfluenceError(Exception):
    """Base de todas as falhas do gateway."""

    code: str = "CONFLUENCE_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ──────────────────────────────────────────────────────────────────────────────
# Transporte
# ──────────────────────────────────────────────────────────────────────────────


class TransportError(ConfluenceError):
    """Falha ao executar uma chamada HTTP contra a API remota."""

    code = "TRANSPORT_ERROR"

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class NetworkError(TransportError):
    """Conexão recusada, DNS, reset ou erro de protocolo."""

    code = "NETWORK_ERROR"


class TransportTimeoutError(TransportError):
    """Tentativa excedeu o timeout configurado."""

    code = "TIMEOUT_ERROR"


class HttpStatusError(TransportError):
    """Resposta com status fora da faixa 2xx."""

    code = "HTTP_ERROR"

    def __init__(self, message: str, status_code: int, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint)
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class AuthenticationError(HttpStatusError):
    """Credenciais rejeitadas (401) ou permissão insuficiente (403)."""

    code = "AUTHENTICATION_ERROR"


class ResponseParseError(TransportError):
    """Corpo de resposta 2xx que não é JSON válido."""

    code = "PARSE_ERROR"


# ──────────────────────────────────────────────────────────────────────────────
# Configuração
# ──────────────────────────────────────────────────────────────────────────────


class ConfigurationError(ConfluenceError):
    """Configuração ausente ou inválida."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, config_key: str | None = None) -> None:
        super().__init__(message)
        self.config_key = config_key


# ──────────────────────────────────────────────────────────────────────────────
# Validação
# ──────────────────────────────────────────────────────────────────────────────


class ValidationError(ConfluenceError):
    """Entrada fora do contrato declarado."""

    code = "VALIDATION_ERROR"


class RequestValidationError(ValidationError):
    """Argumentos brutos rejeitados pelo schema da operação.

    A mensagem contém apenas o primeiro erro; a lista completa fica em `errors`.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidValueError(ValidationError):
    """Value object construído com valor inválido."""

    code = "INVALID_VALUE"

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidPageIdError(InvalidValueError):
    code = "INVALID_PAGE_ID"


class InvalidPageTitleError(InvalidValueError):
    code = "INVALID_PAGE_TITLE"


class InvalidSpaceKeyError(InvalidValueError):
    code = "INVALID_SPACE_KEY"


class InvalidSpaceNameError(InvalidValueError):
    code = "INVALID_SPACE_NAME"


class InvalidSearchQueryError(InvalidValueError):
    code = "INVALID_SEARCH_QUERY"


# ──────────────────────────────────────────────────────────────────────────────
# Domínio
# ──────────────────────────────────────────────────────────────────────────────


class DomainError(ConfluenceError):
    """Resultado de negócio esperado; atravessa o use case sem wrapping."""

    code = "DOMAIN_ERROR"


class NotFoundError(DomainError):
    code = "NOT_FOUND"


class PageNotFoundError(NotFoundError):
    code = "PAGE_NOT_FOUND"

    def __init__(self, page_id: str) -> None:
        super().__init__(f"Page not found: {page_id}")
        self.page_id = page_id


class SpaceNotFoundError(NotFoundError):
    code = "SPACE_NOT_FOUND"

    def __init__(self, space_key: str) -> None:
        super().__init__(f"Space not found: {space_key}")
        self.space_key = space_key


class AlreadyExistsError(DomainError):
    code = "ALREADY_EXISTS"


class SpaceAlreadyExistsError(AlreadyExistsError):
    code = "SPACE_ALREADY_EXISTS"

    def __init__(self, space_key: str) -> None:
        super().__init__(f"Space already exists: {space_key}")
        self.space_key = space_key


class ConflictError(DomainError):
    code = "CONFLICT"


class PageTitleConflictError(ConflictError):
    code = "PAGE_TITLE_CONFLICT"

    def __init__(self, title: str) -> None:
        super().__init__(f'A page with title "{title}" already exists in this space')
        self.title = title


class VersionConflictError(ConflictError):
    code = "VERSION_CONFLICT"

    def __init__(self, current_version: int, provided_version: int) -> None:
        super().__init__(
            f"Version mismatch. Current version is {current_version}, "
            f"but you provided {provided_version}. Please refresh and try again."
        )
        self.current_version = current_version
        self.provided_version = provided_version


# ──────────────────────────────────────────────────────────────────────────────
# Operação
# ──────────────────────────────────────────────────────────────────────────────


class DomainOperationError(ConfluenceError):
    """Falha de infraestrutura ou causa desconhecida durante um use case."""

    code = "OPERATION_FAILED"

    def __init__(self, message: str, action: str | None = None) -> None:
        super().__init__(message)
        self.action = action
