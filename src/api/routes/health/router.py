"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_confluence_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    detail: str | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "detail": self.detail,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: settings Confluence válidas e gateway montado."""
    settings_check = _check_settings()
    gateway_check = _check_gateway(getattr(request.app.state, "gateway", None))
    ready = settings_check.status == "ok" and gateway_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "settings": settings_check.as_dict(),
            "gateway": gateway_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_settings() -> DependencyCheck:
    errors = get_confluence_settings().validate()
    if errors:
        logger.warning("readiness_settings_invalid", extra={"error_count": len(errors)})
        return DependencyCheck(status="failed", error="; ".join(errors))
    return DependencyCheck(status="ok")


def _check_gateway(gateway: Any | None) -> DependencyCheck:
    if gateway is None:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok", detail=f"{len(gateway.operation_names)} operations")
