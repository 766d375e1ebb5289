"""Settings específicas da API Confluence.

Credenciais, geração da API (v1/v2) e política de timeout/retry.
Valores de tempo chegam em milissegundos pelo ambiente e são expostos
também em segundos para o cliente HTTP.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

# Gerações de API suportadas
SUPPORTED_API_VERSIONS: frozenset[str] = frozenset({"v1", "v2"})

DEFAULT_API_VERSION: str = "v2"
DEFAULT_TIMEOUT_MS: int = 30_000
DEFAULT_RETRY_ATTEMPTS: int = 3
DEFAULT_RETRY_DELAY_MS: int = 1_000

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ConfluenceSettings:
    """Configurações de acesso ao Confluence.

    Attributes:
        host_url: URL do site (ex: https://acme.atlassian.net)
        user_email: Email da conta usada na autenticação basic
        api_token: Token de API da conta
        api_version: Geração da API (v1|v2)
        custom_base_path: Base da API explícita da geração `api_version`
        timeout_ms: Timeout por tentativa
        retry_attempts: Máximo de tentativas por chamada
        retry_delay_ms: Base do backoff exponencial
    """

    host_url: str = ""
    user_email: str = ""
    api_token: str = ""
    api_version: str = DEFAULT_API_VERSION
    custom_base_path: str = ""

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1000

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Confluence.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.host_url:
            errors.append("CONFLUENCE_HOST_URL não configurado")
        elif not self.host_url.startswith(("http://", "https://")):
            errors.append("CONFLUENCE_HOST_URL deve ser uma URL http(s)")

        if not self.user_email:
            errors.append("CONFLUENCE_USER_EMAIL não configurado")
        elif not _EMAIL_PATTERN.match(self.user_email):
            errors.append("CONFLUENCE_USER_EMAIL deve ser um email válido")

        if not self.api_token:
            errors.append("CONFLUENCE_API_TOKEN não configurado")

        if self.api_version not in SUPPORTED_API_VERSIONS:
            errors.append("CONFLUENCE_API_VERSION deve ser 'v1' ou 'v2'")

        if self.timeout_ms <= 0:
            errors.append("CONFLUENCE_TIMEOUT_MS deve ser > 0")

        if self.retry_attempts < 1:
            errors.append("CONFLUENCE_RETRY_ATTEMPTS deve ser >= 1")

        if self.retry_delay_ms < 0:
            errors.append("CONFLUENCE_RETRY_DELAY_MS deve ser >= 0")

        return errors


def _load_from_env() -> ConfluenceSettings:
    """Carrega ConfluenceSettings a partir de variáveis de ambiente."""
    return ConfluenceSettings(
        host_url=os.getenv("CONFLUENCE_HOST_URL", ""),
        user_email=os.getenv("CONFLUENCE_USER_EMAIL", ""),
        api_token=os.getenv("CONFLUENCE_API_TOKEN", ""),
        api_version=os.getenv("CONFLUENCE_API_VERSION", DEFAULT_API_VERSION).lower(),
        custom_base_path=os.getenv("CONFLUENCE_CUSTOM_BASE_PATH", ""),
        timeout_ms=int(os.getenv("CONFLUENCE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
        retry_attempts=int(
            os.getenv("CONFLUENCE_RETRY_ATTEMPTS", str(DEFAULT_RETRY_ATTEMPTS))
        ),
        retry_delay_ms=int(
            os.getenv("CONFLUENCE_RETRY_DELAY_MS", str(DEFAULT_RETRY_DELAY_MS))
        ),
    )


@lru_cache(maxsize=1)
def get_confluence_settings() -> ConfluenceSettings:
    """Retorna instância cacheada de ConfluenceSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
