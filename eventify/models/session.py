"""Sesión de autenticación activa."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from eventify.models.user import User


def parse_expiration(value: Optional[str]) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    candidate = value.strip().replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


@dataclass(slots=True)
class AuthSession:
    """Mantiene la información de autenticación activa."""

    token: str
    expiration: Optional[datetime]
    api_base: str
    user: Optional[User] = None

    def is_valid(self) -> bool:
        """Indica si el token sigue vigente (si se proporcionó expiración)."""

        if self.expiration is None:
            return True
        if self.expiration.tzinfo is None:
            return datetime.now(timezone.utc).replace(tzinfo=None) < self.expiration
        return datetime.now(timezone.utc) < self.expiration.astimezone(timezone.utc)

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "expiration": self.expiration.isoformat() if self.expiration else None,
            "api_base": self.api_base,
            "user": self.user.to_dict() if self.user else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthSession":
        user_data = data.get("user")
        return cls(
            token=data["token"],
            expiration=parse_expiration(data.get("expiration")),
            api_base=data.get("api_base") or "",
            user=User.from_json(user_data) if user_data else None,
        )


__all__ = ["AuthSession", "parse_expiration"]
