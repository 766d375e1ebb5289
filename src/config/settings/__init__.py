"""Agregador de settings do gateway Confluence.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.confluence import (
    DEFAULT_API_VERSION,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT_MS,
    SUPPORTED_API_VERSIONS,
    ConfluenceSettings,
    get_confluence_settings,
)

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_RETRY_ATTEMPTS",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT_MS",
    "SUPPORTED_API_VERSIONS",
    "BaseSettings",
    "ConfluenceSettings",
    "Environment",
    "get_base_settings",
    "get_confluence_settings",
]
