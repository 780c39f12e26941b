"""Cliente HTTP del backend de eventos.

Encapsula las peticiones REST. Devuelve el JSON ya decodificado con la
forma ``{success, data, message}``; la conversión a modelos se hace en los
repositorios.
"""

from __future__ import annotations

import json
import logging
import socket
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Fallo de transporte o respuesta ilegible del backend."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class APIClient:
    """Provee acceso a los endpoints de eventos, categorías y autenticación."""

    def __init__(self, api_base: str, timeout: float = 15.0) -> None:
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Autenticación
    # ------------------------------------------------------------------
    def login(self, email: str, password: str) -> dict:
        return self.post("login", {"email": email, "password": password})

    def register(self, name: str, email: str, password: str, c_password: str) -> dict:
        return self.post(
            "register",
            {
                "name": name,
                "email": email,
                "password": password,
                "c_password": c_password,
            },
        )

    # ------------------------------------------------------------------
    # Eventos y categorías
    # ------------------------------------------------------------------
    def fetch_events(self, token: str) -> dict:
        return self.get("events", token=token)

    def fetch_events_by_user(self, token: str, user_id: int) -> dict:
        return self.post("eventsByUser", {"id": user_id}, token=token)

    def fetch_categories(self, token: str) -> dict:
        return self.get("categories", token=token)

    def register_user_to_event(self, token: str, user_id: int, event_id: int | str) -> dict:
        return self.post(
            "registerEvent", {"user_id": user_id, "event_id": event_id}, token=token
        )

    def unregister_user_from_event(
        self, token: str, user_id: int, event_id: int | str
    ) -> dict:
        return self.post(
            "unregisterEvent", {"user_id": user_id, "event_id": event_id}, token=token
        )

    # ------------------------------------------------------------------
    # Transporte
    # ------------------------------------------------------------------
    def get(self, path: str, *, token: Optional[str] = None) -> dict:
        return self._send("GET", path, None, token)

    def post(self, path: str, payload: Any = None, *, token: Optional[str] = None) -> dict:
        return self._send("POST", path, payload, token)

    def _send(self, method: str, path: str, payload: Any, token: Optional[str]) -> dict:
        url = f"{self.api_base}/{path.lstrip('/')}"
        headers = {"Accept": "application/json"}
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        if token:
            headers["Authorization"] = f"Bearer {token}"

        request = Request(url, data=data, method=method, headers=headers)
        logger.debug("%s %s", method, url)

        try:
            with urlopen(request, timeout=self.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            # El backend responde 4xx con el mismo sobre {success, message}
            body = self._decode_error_body(exc)
            if isinstance(body, dict) and "success" in body:
                logger.warning("HTTP %s on %s: %s", exc.code, url, body.get("message"))
                return body
            logger.warning("HTTP %s on %s", exc.code, url)
            raise APIError(f"HTTP error {exc.code} on {path}", status=exc.code) from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise APIError(f"Request to {path} timed out") from exc
            raise APIError(f"Could not connect to the service: {exc.reason}") from exc
        except socket.timeout as exc:
            raise APIError(f"Request to {path} timed out") from exc

        try:
            body = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise APIError(f"Response from {path} is not valid JSON") from exc

        if not isinstance(body, dict):
            raise APIError(f"Unexpected response format from {path}")
        return body

    @staticmethod
    def _decode_error_body(exc: HTTPError) -> Any:
        try:
            raw = exc.read()
        except OSError:
            return None
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return None


__all__ = ["APIClient", "APIError"]
