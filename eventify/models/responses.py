"""Envoltorios de las respuestas del API.

Todas las respuestas siguen la forma ``{success, data, message}``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping


@dataclass(frozen=True, slots=True)
class FetchResponse:
    """Respuesta de un listado (eventos, categorías)."""

    success: bool
    data: List[dict] = field(default_factory=list)
    message: str = ""

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "FetchResponse":
        data = payload.get("data")
        if data is None:
            data = []
        elif not isinstance(data, list):
            raise ValueError("Expected a list in 'data'")
        return cls(
            success=bool(payload.get("success", False)),
            data=data,
            message=payload.get("message") or "",
        )


@dataclass(frozen=True, slots=True)
class AuthResponse:
    """Respuesta de login, registro o inscripción a eventos."""

    success: bool
    message: str = ""
    data: dict = field(default_factory=dict)

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "AuthResponse":
        data = payload.get("data")
        return cls(
            success=bool(payload.get("success", False)),
            message=payload.get("message") or "",
            data=data if isinstance(data, dict) else {},
        )


__all__ = ["AuthResponse", "FetchResponse"]
