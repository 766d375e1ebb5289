"""Núcleo de transporte HTTP para a API Confluence.

Responsabilidades:
- Montar a URL final (base + endpoint, ou endpoint absoluto verbatim)
- Executar cada tentativa dentro de um escopo de timeout próprio
- Retry sequencial com backoff exponencial (sem jitter)
- Classificar toda falha em uma subclasse de TransportError

O header de autenticação é calculado uma única vez na construção e
nunca é alterado depois. Nenhum outro estado mutável é compartilhado
entre chamadas concorrentes.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

import httpx

from api.connectors.confluence.http_errors import (
    classify_status_error,
    extract_error_message,
)
from api.connectors.confluence.http_logging import (
    log_request_attempt,
    log_request_failure,
    log_request_success,
)
from app.observability import get_correlation_id, record_retry
from utils.errors import (
    NetworkError,
    ResponseParseError,
    TransportError,
    TransportTimeoutError,
)

logger = logging.getLogger(__name__)

RetryPredicate = Callable[[TransportError, int], bool]
SleepFunc = Callable[[float], Awaitable[None]]

# Status sem corpo útil: retornam {} mesmo com content-type JSON
_EMPTY_BODY_STATUSES = frozenset({202, 204})


class ApiVersion(str, Enum):
    """Gerações da API REST do Confluence."""

    V1 = "v1"
    V2 = "v2"


# ──────────────────────────────────────────────────────────────────────────────
# Política de retry
# ──────────────────────────────────────────────────────────────────────────────


def retry_all(error: TransportError, attempt: int) -> bool:
    """Repete qualquer falha, inclusive erros 4xx."""
    return True


def retry_transient(error: TransportError, attempt: int) -> bool:
    """Repete apenas falhas transitórias (rede, timeout, 429 e 5xx)."""
    if isinstance(error, (NetworkError, TransportTimeoutError)):
        return True
    status_code = getattr(error, "status_code", None)
    return status_code is not None and (status_code == 429 or status_code >= 500)


def backoff_delay(attempt: int, base_seconds: float) -> float:
    """Delay antes da tentativa seguinte: base, base×2, base×4, ..."""
    return base_seconds * (2 ** (attempt - 1))


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP.

    Attributes:
        timeout_seconds: Timeout de cada tentativa
        max_attempts: Máximo de tentativas por chamada (inclui a primeira)
        backoff_base_seconds: Delay após a primeira falha
        custom_base_path: Base da API explícita; vazio = default da geração
        retry_predicate: Decide se uma falha deve ser repetida
    """

    timeout_seconds: float = 30.0
    max_attempts: int = 3
    backoff_base_seconds: float = 1.0
    custom_base_path: str = ""
    retry_predicate: RetryPredicate = field(default=retry_all)


@dataclass(frozen=True)
class TransportRequest:
    """Chamada lógica; recriada a cada tentativa, nunca mutada."""

    method: str
    url: str
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = None


# ──────────────────────────────────────────────────────────────────────────────
# Helpers de URL e headers
# ──────────────────────────────────────────────────────────────────────────────


def is_absolute_url(url: str) -> bool:
    """True se `url` é uma URL completa (scheme + host)."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return bool(parsed.scheme) and bool(parsed.host)


def build_api_url(base_url: str, endpoint: str) -> str:
    """Junta base e endpoint com exatamente uma barra entre eles.

    Endpoints absolutos são devolvidos sem modificação.
    """
    if is_absolute_url(endpoint):
        return endpoint
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def normalize_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Converte query params para string; booleanos viram true/false, None é omitido."""
    normalized: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            normalized[key] = "true" if value else "false"
        else:
            normalized[key] = str(value)
    return normalized


def build_basic_auth_header(user_email: str, api_token: str) -> str:
    credentials = f"{user_email}:{api_token}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


# ──────────────────────────────────────────────────────────────────────────────
# Cliente base
# ──────────────────────────────────────────────────────────────────────────────


class ConfluenceHttpClient:
    """Cliente HTTP base para uma geração da API Confluence.

    Subclasses definem apenas `api_version` e `default_base_path`.

    Args:
        host_url: URL do site (ex: https://acme.atlassian.net)
        user_email: Email da conta
        api_token: Token de API
        config: Timeout/retry/base path
        transport: Transport httpx injetável (testes usam MockTransport)
        sleep: Função de espera do backoff (default asyncio.sleep)
    """

    api_version: ClassVar[ApiVersion]
    default_base_path: ClassVar[str]

    def __init__(
        self,
        host_url: str,
        user_email: str,
        api_token: str,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._host_url = host_url.rstrip("/")
        self._base_url = self._resolve_base_url()
        self._transport = transport
        self._sleep = sleep or asyncio.sleep
        self._default_headers: dict[str, str] = {
            "Authorization": build_basic_auth_header(user_email, api_token),
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def web_base_url(self) -> str:
        """Base para links de navegação (host + /wiki, sem duplicar)."""
        if self._host_url.endswith("/wiki"):
            return self._host_url
        return f"{self._host_url}/wiki"

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def _resolve_base_url(self) -> str:
        custom = self._config.custom_base_path
        if not custom:
            return f"{self._host_url}{self.default_base_path}"
        if is_absolute_url(custom):
            return custom.rstrip("/")
        return build_api_url(self._host_url, custom).rstrip("/")

    def build_url(self, endpoint: str) -> str:
        return build_api_url(self._base_url, endpoint)

    async def send_request(self, request: TransportRequest) -> Any:
        """Executa a chamada com retry e devolve o corpo JSON parseado.

        Returns:
            Corpo JSON; `{}` para 202/204 ou corpo vazio.

        Raises:
            TransportError: Erro da última tentativa após esgotar o retry.
        """
        max_attempts = max(1, self._config.max_attempts)
        started = time.perf_counter()

        for attempt in range(1, max_attempts + 1):
            log_request_attempt(
                request.method,
                self.build_url(request.url),
                self.api_version.value,
                attempt,
            )
            try:
                body = await self._attempt(request)
            except TransportError as exc:
                retryable = self._config.retry_predicate(exc, attempt)
                if attempt >= max_attempts or not retryable:
                    log_request_failure(
                        request.method,
                        request.url,
                        exc,
                        attempt,
                        (time.perf_counter() - started) * 1000,
                    )
                    raise
                record_retry(request.url, attempt, type(exc).__name__, get_correlation_id())
                await self._sleep(backoff_delay(attempt, self._config.backoff_base_seconds))
            else:
                log_request_success(
                    request.method,
                    request.url,
                    attempt,
                    (time.perf_counter() - started) * 1000,
                )
                return body

        # max_attempts >= 1: o loop sempre retorna ou levanta
        raise TransportError("Retry loop exited without result", request.url)

    async def _attempt(self, request: TransportRequest) -> Any:
        """Uma tentativa: round trip dentro do escopo de timeout."""
        url = self.build_url(request.url)
        headers = {**self._default_headers, **request.headers}
        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                    response = await client.request(
                        request.method,
                        url,
                        params=normalize_params(request.params),
                        headers=headers,
                        json=request.data,
                    )
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise TransportTimeoutError(
                f"Request timed out after {self._config.timeout_seconds}s",
                request.url,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            raise NetworkError(f"Network error: {exc}", request.url) from exc

        return self._parse_response(response, request.url)

    def _parse_response(self, response: httpx.Response, endpoint: str) -> Any:
        if not response.is_success:
            raise classify_status_error(
                extract_error_message(response),
                response.status_code,
                endpoint,
            )

        if response.status_code in _EMPTY_BODY_STATUSES or not response.content.strip():
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseParseError(f"Failed to parse response: {exc}", endpoint) from exc
