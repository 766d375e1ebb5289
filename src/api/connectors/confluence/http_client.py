"""Clientes por geração da API Confluence e factory de seleção.

- V1 (/wiki/rest/api): busca CQL, lookup por título, spaces por key
- V2 (/api/v2): CRUD de páginas, listagens, spaces por id

A seleção é feita por ApiVersion (enum fechado); qualquer outro valor
falha na construção com ConfigurationError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.confluence.http_base import (
    ApiVersion,
    ConfluenceHttpClient,
    HttpClientConfig,
    SleepFunc,
)
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx

    from config.settings import ConfluenceSettings


class ConfluenceHttpClientV1(ConfluenceHttpClient):
    """API REST legada; única com suporte a CQL."""

    api_version = ApiVersion.V1
    default_base_path = "/wiki/rest/api"


class ConfluenceHttpClientV2(ConfluenceHttpClient):
    """API REST v2."""

    api_version = ApiVersion.V2
    default_base_path = "/api/v2"


_CLIENT_CLASSES: dict[ApiVersion, type[ConfluenceHttpClient]] = {
    ApiVersion.V1: ConfluenceHttpClientV1,
    ApiVersion.V2: ConfluenceHttpClientV2,
}


def parse_api_version(value: str | ApiVersion) -> ApiVersion:
    """Converte flag de geração para ApiVersion.

    Raises:
        ConfigurationError: Se o valor não for "v1" nem "v2".
    """
    try:
        return ApiVersion(value)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported API version: {value!r}. Expected 'v1' or 'v2'",
            config_key="CONFLUENCE_API_VERSION",
        ) from exc


def build_client_config(
    settings: ConfluenceSettings,
    api_version: str | ApiVersion | None = None,
) -> HttpClientConfig:
    """Converte settings (ms) para HttpClientConfig (segundos).

    `custom_base_path` vale só para a geração configurada em
    `settings.api_version`; a outra geração mantém seu path default.
    """
    configured = parse_api_version(settings.api_version)
    target = parse_api_version(api_version or configured)
    return HttpClientConfig(
        timeout_seconds=settings.timeout_seconds,
        max_attempts=settings.retry_attempts,
        backoff_base_seconds=settings.retry_delay_seconds,
        custom_base_path=settings.custom_base_path if target is configured else "",
    )


def create_http_client(
    settings: ConfluenceSettings,
    api_version: str | ApiVersion | None = None,
    *,
    config: HttpClientConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    sleep: SleepFunc | None = None,
) -> ConfluenceHttpClient:
    """Factory de cliente Confluence para a geração pedida.

    Args:
        settings: ConfluenceSettings com host e credenciais
        api_version: Geração desejada; None usa settings.api_version
        config: Override de timeout/retry (default derivado das settings)
        transport: Transport httpx injetável
        sleep: Função de espera do backoff

    Returns:
        ConfluenceHttpClientV1 ou ConfluenceHttpClientV2.

    Raises:
        ConfigurationError: Geração desconhecida ou host ausente.
    """
    version = parse_api_version(api_version or settings.api_version)
    if not settings.host_url:
        raise ConfigurationError(
            "Confluence host URL is not configured",
            config_key="CONFLUENCE_HOST_URL",
        )

    client_class = _CLIENT_CLASSES[version]
    return client_class(
        settings.host_url,
        settings.user_email,
        settings.api_token,
        config or build_client_config(settings, version),
        transport=transport,
        sleep=sleep,
    )
