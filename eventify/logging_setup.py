"""Configuración de logging para la línea de comandos."""

from __future__ import annotations

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """Un único handler de consola.

    Sin nivel explícito se usa ``EVENTIFY_LOG_LEVEL``; un nivel desconocido
    cae a INFO.
    """

    level_name = (level or os.getenv("EVENTIFY_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


__all__ = ["setup_logging"]
