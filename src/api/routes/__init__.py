"""Rotas HTTP da API — adapters de entrada.

Estrutura:
- routes/health/: health checks e readiness
- routes/tools/: listagem e despacho das operações Confluence

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
