"""Modelo de dominio para eventos.

Los eventos se construyen a partir de las respuestas del API. Cada endpoint
devuelve un subconjunto distinto de campos, por eso existen dos
constructores parciales.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


def parse_datetime(value: str) -> datetime:
    """Convierte una fecha del API a ``datetime`` local sin zona horaria.

    Acepta ISO-8601 (con ``Z`` final) y el formato ``YYYY-MM-DD HH:MM:SS``.
    Las fechas con zona se pasan a hora local para poder compararlas con el
    reloj del dispositivo.
    """

    if not isinstance(value, str):
        raise ValueError(f"Invalid date value: {value!r}")
    candidate = value.strip().replace("Z", "+00:00")
    parsed = datetime.fromisoformat(candidate)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _optional_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    return parse_datetime(value)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True, slots=True)
class Event:
    """Actividad programada con metadatos de fecha, lugar y categoría."""

    id: str
    title: str
    category: str
    start_time: datetime
    image_url: str
    organizer_id: int | None = None
    description: str | None = None
    end_time: datetime | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    max_attendees: int | None = None
    price: float | None = None
    deleted: bool | None = None

    # ENDPOINT --> events
    @classmethod
    def from_fetch_events_json(cls, json: Mapping[str, Any]) -> "Event":
        return cls(
            id=str(json["id"]),
            title=json["title"],
            start_time=parse_datetime(json["start_time"]),
            image_url=json["image_url"],
            category=json["category"],
        )

    # ENDPOINT --> eventsByUser
    @classmethod
    def from_fetch_events_by_user_json(cls, json: Mapping[str, Any]) -> "Event":
        deleted = json.get("deleted")
        return cls(
            id=str(json["id"]),
            organizer_id=_optional_int(json.get("organizer_id")),
            title=json["title"],
            description=json.get("description"),
            category=json["category"],
            start_time=parse_datetime(json["start_time"]),
            end_time=_optional_datetime(json.get("end_time")),
            location=json.get("location"),
            latitude=_optional_float(json.get("latitude")),
            longitude=_optional_float(json.get("longitude")),
            max_attendees=_optional_int(json.get("max_attendees")),
            price=_optional_float(json.get("price")),
            image_url=json.get("image_url") or "",
            deleted=None if deleted is None else bool(deleted),
        )


__all__ = ["Event", "parse_datetime"]
