"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def _flag(value: Any) -> Optional[bool]:
    # El backend envía 0/1, "true"/"false" o booleanos según el endpoint.
    if value is None:
        return None
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        return None
    return bool(value)


@dataclass(frozen=True, slots=True)
class User:
    """Usuario autenticado o listado por el API."""

    id: int
    name: str
    email: str | None = None
    role: str = "u"
    actived: bool | None = None
    email_confirmed: bool | None = None
    deleted: bool = False
    profile_picture: str | None = None

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "User":
        return cls(
            id=int(json["id"]),
            name=json["name"],
            email=json.get("email"),
            role=json.get("role") or "u",
            actived=_flag(json.get("actived")),
            email_confirmed=_flag(json.get("email_confirmed")),
            deleted=bool(_flag(json.get("deleted"))),
            profile_picture=json.get("profile_picture"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "actived": self.actived,
            "email_confirmed": self.email_confirmed,
            "deleted": self.deleted,
            "profile_picture": self.profile_picture,
        }


__all__ = ["User"]
