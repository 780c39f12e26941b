"""Operaciones sobre listados de eventos."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from eventify.models.event import Event


def upcoming(events: Iterable[Event], now: datetime) -> list[Event]:
    """Eventos que aún no han comenzado."""

    return [event for event in events if event.start_time > now]


def exclude_registered(events: Iterable[Event], registered: Iterable[Event]) -> list[Event]:
    """Quita los eventos a los que el usuario ya está inscrito.

    Evita que el usuario se inscriba dos veces al mismo evento.
    """

    registered = list(registered)
    return [
        event
        for event in events
        if not any(event.id == user_event.id for user_event in registered)
    ]


def filter_by_category(events: Iterable[Event], category: str) -> list[Event]:
    return [event for event in events if event.category == category]


def sort_by_start_time(events: Iterable[Event]) -> list[Event]:
    return sorted(events, key=lambda event: event.start_time)


__all__ = ["exclude_registered", "filter_by_category", "sort_by_start_time", "upcoming"]
