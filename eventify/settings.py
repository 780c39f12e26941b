"""Configuración de la aplicación leída del entorno o de ``.env``."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parámetros del cliente, con prefijo ``EVENTIFY_`` en el entorno.

    ``EVENTIFY_TOKEN_FILE=none`` desactiva el archivo de sesión y la deja
    sólo en memoria.
    """

    # ---- backend ----
    api_base: str = "http://localhost:8000/api"
    request_timeout: float = 15.0

    # ---- sesión ----
    token_file: Optional[Path] = Path.home() / ".eventify" / "session.json"

    # ---- runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EVENTIFY_",  # EVENTIFY_API_BASE, EVENTIFY_LOG_LEVEL, etc.
        env_parse_none_str="none",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Lee la configuración vigente (entorno + ``.env``)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
