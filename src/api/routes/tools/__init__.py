"""Rotas HTTP do gateway de operações."""

from api.routes.tools.router import router

__all__ = ["router"]
