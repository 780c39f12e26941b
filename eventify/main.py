"""Punto de entrada de la aplicación.

Crea los componentes de infraestructura, servicios y estado, y ejecuta el
subcomando pedido desde la línea de comandos.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from typing import Optional, Sequence

from eventify import logging_setup
from eventify.core.auth import AuthService
from eventify.core.state import EventProvider
from eventify.infrastructure.api_client import APIClient, APIError
from eventify.infrastructure.repositories import AuthRepository, EventRepository
from eventify.infrastructure.token_store import TokenStore
from eventify.models.event import Event
from eventify.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="eventify", description="Browse and manage events")
    p.add_argument("--log_level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    sub = p.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and store the session token")
    login.add_argument("--email", required=True)
    login.add_argument("--password", help="Prompted when omitted")

    sub.add_parser("logout", help="Forget the stored session")

    events = sub.add_parser("events", help="List upcoming events not yet joined")
    events.add_argument("--category", help="Only show events of this category")

    sub.add_parser("my-events", help="List upcoming events you are registered to")
    sub.add_parser("categories", help="List event categories")

    register = sub.add_parser("register", help="Register to an event")
    register.add_argument("event_id")

    unregister = sub.add_parser("unregister", help="Unregister from an event")
    unregister.add_argument("event_id")
    return p


def _format_event(event: Event) -> str:
    return f"[{event.id}] {event.start_time:%Y-%m-%d %H:%M}  {event.title} ({event.category})"


def run(args: argparse.Namespace, settings: Settings) -> int:
    """Ejecuta el subcomando y devuelve el código de salida."""

    api_client = APIClient(settings.api_base, timeout=settings.request_timeout)
    auth_service = AuthService(
        AuthRepository(api_client), TokenStore(settings.token_file), settings.api_base
    )

    if args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        try:
            response = auth_service.login(args.email, password)
        except (APIError, ValueError, KeyError) as exc:
            print(f"Login error: {exc}", file=sys.stderr)
            return 1
        if not response.success:
            print(response.message or "Login failed", file=sys.stderr)
            return 1
        print("Logged in")
        return 0

    if args.command == "logout":
        auth_service.logout()
        print("Logged out")
        return 0

    provider = EventProvider(EventRepository(api_client), auth_service)
    user = auth_service.current_user

    if args.command in ("my-events", "register", "unregister") and user is None:
        print("Log in first", file=sys.stderr)
        return 1
    if args.command != "categories" and user is not None:
        provider.fetch_events_by_user(user.id)

    if args.command == "events":
        if args.category:
            provider.fetch_events_by_category(args.category)
        else:
            provider.fetch_upcoming_events()
        rows = provider.event_list
    elif args.command == "my-events":
        rows = provider.user_event_list
    elif args.command == "categories":
        provider.fetch_categories()
        for category in provider.category_list:
            print(category.name)
        rows = []
    else:
        if args.command == "register":
            provider.register_user_to_event(user.id, args.event_id)
        else:
            provider.unregister_user_from_event(user.id, args.event_id)
        rows = provider.user_event_list

    if provider.fetch_error_message:
        print(provider.fetch_error_message, file=sys.stderr)
        return 1

    for event in rows:
        print(_format_event(event))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Arranca la aplicación con las dependencias configuradas."""

    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging_setup.setup_logging(args.log_level or settings.log_level)
    sys.exit(run(args, settings))


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
