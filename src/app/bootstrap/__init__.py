"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e monta o DispatchGateway com as implementações concretas.

Uso:
    from app.bootstrap import initialize_app, get_gateway

    # Na inicialização do serviço
    initialize_app()

    # Obter gateway
    gateway = get_gateway()
    envelope = await gateway.handle("confluence_get_page", {"pageId": "123"})
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_confluence_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from api.tools.registry import DispatchGateway

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level.upper(),
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(strict: bool | None = None) -> None:
    """Valida settings obrigatórias no startup.

    Args:
        strict: Força falha em caso de erro. None = estrito apenas em
            staging/production; em development só registra alerta.

    Raises:
        ConfigurationError: Settings inválidas em modo estrito.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS if strict is None else strict

    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"confluence: {error}" for error in get_confluence_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_gateway() -> DispatchGateway:
    """Obtém o DispatchGateway (singleton) a partir das settings do ambiente."""
    from app.bootstrap.dependencies import build_gateway

    return build_gateway(get_confluence_settings())
