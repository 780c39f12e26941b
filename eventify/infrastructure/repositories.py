"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from eventify.infrastructure.api_client import APIClient
from eventify.models.responses import AuthResponse, FetchResponse


class EventRepository:
    """Repositorio de eventos y categorías basado en un cliente API."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def fetch_events(self, token: str) -> FetchResponse:
        return FetchResponse.from_json(self._api_client.fetch_events(token))

    def fetch_events_by_user(self, token: str, user_id: int) -> FetchResponse:
        return FetchResponse.from_json(
            self._api_client.fetch_events_by_user(token, user_id)
        )

    def fetch_categories(self, token: str) -> FetchResponse:
        return FetchResponse.from_json(self._api_client.fetch_categories(token))

    def register_user_to_event(
        self, token: str, user_id: int, event_id: int | str
    ) -> AuthResponse:
        return AuthResponse.from_json(
            self._api_client.register_user_to_event(token, user_id, event_id)
        )

    def unregister_user_from_event(
        self, token: str, user_id: int, event_id: int | str
    ) -> AuthResponse:
        return AuthResponse.from_json(
            self._api_client.unregister_user_from_event(token, user_id, event_id)
        )


class AuthRepository:
    """Repositorio de autenticación (login y registro)."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def login(self, email: str, password: str) -> AuthResponse:
        return AuthResponse.from_json(self._api_client.login(email, password))

    def register(self, name: str, email: str, password: str, c_password: str) -> AuthResponse:
        return AuthResponse.from_json(
            self._api_client.register(name, email, password, c_password)
        )


__all__ = ["AuthRepository", "EventRepository"]
