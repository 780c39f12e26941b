"""Persistencia de la sesión entre ejecuciones."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from eventify.models.session import AuthSession

logger = logging.getLogger(__name__)


class TokenStore:
    """Guarda la sesión en un archivo JSON, o sólo en memoria si no hay ruta."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._session: Optional[AuthSession] = None

    def load(self) -> Optional[AuthSession]:
        if self._session is not None or self.path is None:
            return self._session
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self._session = AuthSession.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return None
        return self._session

    def save(self, session: AuthSession) -> None:
        self._session = session
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(session.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
        )

    def clear(self) -> None:
        self._session = None
        if self.path is not None and self.path.exists():
            self.path.unlink()


__all__ = ["TokenStore"]
