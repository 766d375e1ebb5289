"""Envelope neutro de protocolo devolvido pelo gateway.

Formato de wire:
    {"success": true, "data": ...}
    {"success": false, "message": "..."}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter

_DATA_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@dataclass(frozen=True)
class ToolEnvelope:
    """Resultado de uma chamada despachada."""

    success: bool
    data: Any = None
    message: str | None = None

    @classmethod
    def ok(cls, data: Any) -> ToolEnvelope:
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str) -> ToolEnvelope:
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Forma JSON-serializável (modelos pydantic e datetimes convertidos)."""
        if self.success:
            return {"success": True, "data": _DATA_ADAPTER.dump_python(self.data, mode="json")}
        return {"success": False, "message": self.message or ""}

    def render_json(self) -> str:
        """Texto JSON usado pelos adapters (ex: bloco de texto MCP)."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
