"""Entrypoint HTTP do gateway Confluence.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI). O mesmo
DispatchGateway servido via MCP (app.mcp_entry) fica disponível em
/tools.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import get_gateway, initialize_app, validate_runtime_settings
from config.logging import get_logger
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Monta o gateway (ausente se a configuração Confluence estiver incompleta)
    """
    logger.info("app_starting", extra={"service": "confluence_mcp"})
    validate_runtime_settings()
    app.state.gateway = None

    try:
        app.state.gateway = get_gateway()
    except ConfigurationError as exc:
        logger.warning(
            "gateway_not_ready",
            extra={"error_type": type(exc).__name__, "config_key": exc.config_key},
        )

    yield

    logger.info("app_shutting_down", extra={"service": "confluence_mcp"})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Confluence MCP",
        description="Gateway de operações Confluence (espaços, páginas e busca CQL)",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "confluence_mcp"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting confluence_mcp in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
