"""Estado compartido de la aplicación.

``EventProvider`` mantiene los listados que consumen las pantallas y avisa
de cada cambio mediante la señal ``changed``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from eventify.core import services
from eventify.core.auth import AuthService
from eventify.infrastructure.repositories import EventRepository
from eventify.models.category import Category
from eventify.models.event import Event

logger = logging.getLogger(__name__)

TOKEN_NOT_FOUND = "Token not found"


class EventProvider(QObject):
    """Obtiene, filtra y ordena los eventos visibles para el usuario."""

    changed = pyqtSignal()

    def __init__(
        self,
        repository: EventRepository,
        auth_service: AuthService,
        clock: Callable[[], datetime] = datetime.now,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._repository = repository
        self._auth_service = auth_service
        self._clock = clock

        self.event_list: List[Event] = []
        self.user_event_list: List[Event] = []
        self.category_list: List[Category] = []
        self.fetch_error_message: Optional[str] = None
        self.category_filter: Optional[str] = None

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------
    def fetch_events(self) -> bool:
        """Recarga todos los eventos próximos sin filtro de categoría."""

        loaded = False
        with self._operation("Fetching error"):
            loaded = self._load_events()
        return loaded

    def fetch_events_by_user(self, user_id: int) -> bool:
        """Recarga los eventos a los que el usuario está inscrito."""

        loaded = False
        with self._operation("Fetching error"):
            loaded = self._load_user_events(user_id)
        return loaded

    def fetch_upcoming_events(self) -> bool:
        return self.fetch_events()

    def clear_filter(self) -> bool:
        return self.fetch_upcoming_events()

    def fetch_events_by_category(self, category: str) -> bool:
        """Recarga los eventos y deja sólo los de ``category``.

        Si la recarga falla el listado anterior no se modifica.
        """

        loaded = False
        with self._operation("Fetching error"):
            loaded = self._load_events()
            if loaded:
                self.event_list = services.filter_by_category(self.event_list, category)
                self.remove_user_events()
                self.sort_events_by_time()
                self.category_filter = category
        return loaded

    def remove_user_events(self) -> None:
        self.event_list = services.exclude_registered(self.event_list, self.user_event_list)

    def sort_events_by_time(self) -> None:
        self.event_list = services.sort_by_start_time(self.event_list)

    # ------------------------------------------------------------------
    # Categorías
    # ------------------------------------------------------------------
    def fetch_categories(self) -> bool:
        loaded = False
        with self._operation("Fetching categories error"):
            token = self._token()
            if token is None:
                return False
            response = self._repository.fetch_categories(token)
            if response.success:
                self.category_list = [
                    Category.from_fetch_categories_json(item) for item in response.data
                ]
                self.fetch_error_message = None
                loaded = True
            else:
                self.fetch_error_message = response.message
        return loaded

    # ------------------------------------------------------------------
    # Inscripciones
    # ------------------------------------------------------------------
    def register_user_to_event(self, user_id: int, event_id: int | str) -> bool:
        done = False
        with self._operation("Registration error"):
            token = self._token()
            if token is None:
                return False
            response = self._repository.register_user_to_event(token, user_id, event_id)
            if response.success:
                logger.info("User %s registered to event %s", user_id, event_id)
                # La inscripción ya está hecha; el resultado refleja la recarga.
                done = self._load_user_events(user_id)
                self.remove_user_events()
                self.sort_events_by_time()
            else:
                self.fetch_error_message = response.message
        return done

    def unregister_user_from_event(self, user_id: int, event_id: int | str) -> bool:
        done = False
        with self._operation("Unregistration error"):
            token = self._token()
            if token is None:
                return False
            response = self._repository.unregister_user_from_event(token, user_id, event_id)
            if response.success:
                logger.info("User %s unregistered from event %s", user_id, event_id)
                done = self._load_user_events(user_id)
                self.remove_user_events()
            else:
                self.fetch_error_message = response.message
        return done

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    @contextmanager
    def _operation(self, error_prefix: str) -> Iterator[None]:
        # Toda operación termina con una única notificación a los oyentes.
        try:
            yield
        except Exception as exc:
            logger.exception("%s", error_prefix)
            self.fetch_error_message = f"{error_prefix}: {exc}"
        finally:
            self.changed.emit()

    def _token(self) -> Optional[str]:
        token = self._auth_service.get_token()
        if token is None:
            self.fetch_error_message = TOKEN_NOT_FOUND
        return token

    def _load_events(self) -> bool:
        token = self._token()
        if token is None:
            return False

        response = self._repository.fetch_events(token)
        if not response.success:
            self.fetch_error_message = response.message
            return False

        events = [Event.from_fetch_events_json(item) for item in response.data]
        self.event_list = services.upcoming(events, self._clock())
        self.remove_user_events()
        self.sort_events_by_time()
        self.category_filter = None
        self.fetch_error_message = None
        return True

    def _load_user_events(self, user_id: int) -> bool:
        token = self._token()
        if token is None:
            return False

        response = self._repository.fetch_events_by_user(token, user_id)
        if not response.success:
            self.fetch_error_message = response.message
            return False

        events = [Event.from_fetch_events_by_user_json(item) for item in response.data]
        self.user_event_list = services.sort_by_start_time(
            services.upcoming(events, self._clock())
        )
        self.fetch_error_message = None
        return True


__all__ = ["EventProvider", "TOKEN_NOT_FOUND"]
