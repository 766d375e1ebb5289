"""Conector Confluence - adapter de borda para a API REST (v1 e v2).

Este módulo é o único ponto de IO com o Confluence.
Responsabilidades:
- Transporte HTTP com timeout por tentativa e retry com backoff
- Classificação de falhas em erros tipados
- Seleção do cliente por geração da API
"""

from .http_base import (
    ApiVersion,
    ConfluenceHttpClient,
    HttpClientConfig,
    TransportRequest,
    backoff_delay,
    build_api_url,
    is_absolute_url,
    retry_all,
    retry_transient,
)
from .http_client import (
    ConfluenceHttpClientV1,
    ConfluenceHttpClientV2,
    build_client_config,
    create_http_client,
    parse_api_version,
)
from .http_errors import extract_error_message, is_not_found

__all__ = [
    "ApiVersion",
    "ConfluenceHttpClient",
    "ConfluenceHttpClientV1",
    "ConfluenceHttpClientV2",
    "HttpClientConfig",
    "TransportRequest",
    "backoff_delay",
    "build_api_url",
    "build_client_config",
    "create_http_client",
    "extract_error_message",
    "is_absolute_url",
    "is_not_found",
    "parse_api_version",
    "retry_all",
    "retry_transient",
]
