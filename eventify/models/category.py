"""Categorías de eventos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Category:
    """Categoría usada para filtrar el listado de eventos."""

    name: str
    id: int | None = None
    description: str | None = None

    @classmethod
    def from_fetch_categories_json(cls, json: Mapping[str, Any]) -> "Category":
        raw_id = json.get("id")
        return cls(
            id=None if raw_id is None else int(raw_id),
            name=json["name"],
            description=json.get("description"),
        )


__all__ = ["Category"]
