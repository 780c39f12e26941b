"""Servicio de autenticación: login, registro y acceso al token."""

from __future__ import annotations

import logging
import re
from typing import Optional

from eventify.infrastructure.repositories import AuthRepository
from eventify.infrastructure.token_store import TokenStore
from eventify.models.responses import AuthResponse
from eventify.models.session import AuthSession, parse_expiration
from eventify.models.user import User

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthService:
    """Orquesta el login contra el API y conserva la sesión activa."""

    def __init__(
        self, repository: AuthRepository, token_store: TokenStore, api_base: str = ""
    ) -> None:
        self._repository = repository
        self._token_store = token_store
        self._api_base = api_base

    @property
    def session(self) -> Optional[AuthSession]:
        return self._token_store.load()

    @property
    def current_user(self) -> Optional[User]:
        session = self.session
        return session.user if session else None

    def login(self, email: str, password: str) -> AuthResponse:
        """Autentica al usuario y guarda la sesión si el backend devuelve token."""

        email = email.strip()
        if not email or not password:
            return AuthResponse(success=False, message="Email and password are required")

        response = self._repository.login(email, password)
        if not response.success:
            logger.info("Login rejected for %s: %s", email, response.message)
            return response

        data = response.data
        token = data.get("token") or data.get("access_token")
        if not token:
            return AuthResponse(success=False, message="Token not found", data=data)

        user = User.from_json(data) if "id" in data and "name" in data else None
        session = AuthSession(
            token=token,
            expiration=parse_expiration(data.get("expires_at")),
            api_base=self._api_base,
            user=user,
        )
        self._token_store.save(session)
        logger.info("Logged in as %s", email)
        return response

    def register(self, name: str, email: str, password: str, c_password: str) -> AuthResponse:
        """Registra un usuario nuevo tras validar los datos localmente."""

        name = name.strip()
        email = email.strip()
        if not name or not email or not password:
            return AuthResponse(success=False, message="All fields are required")
        if not _EMAIL_RE.match(email):
            return AuthResponse(success=False, message="Invalid email address")
        if password != c_password:
            return AuthResponse(success=False, message="Passwords do not match")

        return self._repository.register(name, email, password, c_password)

    def logout(self) -> None:
        self._token_store.clear()

    def get_token(self) -> Optional[str]:
        """Devuelve el token vigente o ``None`` si no hay sesión válida."""

        session = self.session
        if session is None:
            return None
        if not session.is_valid():
            logger.info("Stored session expired, clearing it")
            self._token_store.clear()
            return None
        return session.token


__all__ = ["AuthService"]
