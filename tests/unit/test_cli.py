import json

import pytest

from eventify.infrastructure import api_client as api_module
from eventify.infrastructure.token_store import TokenStore
from eventify.main import build_parser, run
from eventify.models.session import AuthSession
from eventify.models.user import User
from eventify.settings import Settings


class FakeResponse:
    def __init__(self, payload):
        self._body = json.dumps(payload).encode()

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


ROUTES = {
    "https://x/api/events": {
        "success": True,
        "data": [
            {"id": 1, "title": "Jazz", "start_time": "2999-05-01 21:00:00", "image_url": "", "category": "Music"},
            {"id": 2, "title": "Derby", "start_time": "2999-04-01 18:00:00", "image_url": "", "category": "Sport"},
            {"id": 3, "title": "Opera", "start_time": "2999-03-01 20:00:00", "image_url": "", "category": "Music"},
        ],
        "message": "Events retrieved",
    },
    "https://x/api/eventsByUser": {
        "success": True,
        "data": [{"id": 3, "title": "Opera", "start_time": "2999-03-01 20:00:00", "category": "Music"}],
        "message": "Events retrieved",
    },
}


@pytest.fixture
def settings(tmp_path, monkeypatch):
    monkeypatch.setattr(
        api_module, "urlopen", lambda request, timeout: FakeResponse(ROUTES[request.full_url])
    )
    return Settings(api_base="https://x/api", token_file=tmp_path / "session.json")


def _log_in(settings):
    TokenStore(settings.token_file).save(
        AuthSession(token="tok", expiration=None, api_base=settings.api_base, user=User(id=9, name="Ana"))
    )


def test_events_lists_upcoming_not_registered(settings, capsys):
    _log_in(settings)
    code = run(build_parser().parse_args(["events", "--category", "Music"]), settings)

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == ["[1] 2999-05-01 21:00  Jazz (Music)"]


def test_my_events_requires_login(settings, capsys):
    code = run(build_parser().parse_args(["my-events"]), settings)
    assert code == 1
    assert "Log in first" in capsys.readouterr().err


def test_events_without_session_reports_missing_token(settings, capsys):
    code = run(build_parser().parse_args(["events"]), settings)
    assert code == 1
    assert capsys.readouterr().err.strip() == "Token not found"


def test_logout_removes_session_file(settings):
    _log_in(settings)
    assert run(build_parser().parse_args(["logout"]), settings) == 0
    assert not settings.token_file.exists()


def test_login_with_malformed_user_prints_error(settings, monkeypatch, capsys):
    monkeypatch.setitem(
        ROUTES,
        "https://x/api/login",
        {"success": True, "data": {"id": "not-a-number", "name": "Ana", "token": "tok"}, "message": ""},
    )
    code = run(build_parser().parse_args(["login", "--email", "ana@example.com", "--password", "pw"]), settings)

    assert code == 1
    assert capsys.readouterr().err.startswith("Login error:")
    assert not settings.token_file.exists()
