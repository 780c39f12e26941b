from datetime import datetime, timedelta, timezone

import pytest

from eventify.core.auth import AuthService
from eventify.infrastructure.token_store import TokenStore
from eventify.models.responses import AuthResponse
from eventify.models.session import AuthSession
from eventify.models.user import User


class FakeAuthRepository:
    def __init__(self, login_response=None, register_response=None):
        self.login_response = login_response or AuthResponse(
            success=True,
            message="User signed in",
            data={"id": 3, "name": "Ana", "email": "ana@example.com", "role": "u", "token": "tok-123"},
        )
        self.register_response = register_response or AuthResponse(success=True, message="User created")
        self.calls = []

    def login(self, email, password):
        self.calls.append(("login", email, password))
        return self.login_response

    def register(self, name, email, password, c_password):
        self.calls.append(("register", name, email))
        return self.register_response


@pytest.fixture
def repository():
    return FakeAuthRepository()


@pytest.fixture
def service(repository):
    return AuthService(repository, TokenStore(), api_base="https://x/api")


def test_login_stores_token_and_user(service):
    response = service.login(" ana@example.com ", "pw")

    assert response.success is True
    assert service.get_token() == "tok-123"
    assert service.current_user == User(id=3, name="Ana", email="ana@example.com", role="u")
    assert service.session.api_base == "https://x/api"


def test_login_without_token_fails(repository, service):
    repository.login_response = AuthResponse(success=True, data={"id": 3, "name": "Ana"})

    response = service.login("ana@example.com", "pw")
    assert response.success is False
    assert response.message == "Token not found"
    assert service.get_token() is None


def test_login_rejected_by_backend(repository, service):
    repository.login_response = AuthResponse(success=False, message="Unauthorised")
    assert service.login("ana@example.com", "bad").message == "Unauthorised"
    assert service.current_user is None


def test_login_requires_credentials(repository, service):
    assert service.login("", "pw").success is False
    assert repository.calls == []


def test_expired_session_yields_no_token():
    store = TokenStore()
    store.save(AuthSession(token="old", expiration=datetime.now(timezone.utc) - timedelta(minutes=1), api_base=""))
    service = AuthService(FakeAuthRepository(), store)

    assert service.get_token() is None
    assert store.load() is None


def test_logout_clears_session(service):
    service.login("ana@example.com", "pw")
    service.logout()
    assert service.get_token() is None


@pytest.mark.parametrize(
    "name, email, password, confirm, message",
    [
        ("", "ana@example.com", "pw", "pw", "All fields are required"),
        ("Ana", "not-an-email", "pw", "pw", "Invalid email address"),
        ("Ana", "ana@example.com", "pw", "other", "Passwords do not match"),
    ],
)
def test_register_validates_locally(repository, service, name, email, password, confirm, message):
    response = service.register(name, email, password, confirm)
    assert response.success is False
    assert response.message == message
    assert repository.calls == []


def test_register_calls_backend(repository, service):
    assert service.register("Ana", "ana@example.com", "pw", "pw").message == "User created"
    assert repository.calls == [("register", "Ana", "ana@example.com")]


def test_login_accepts_textual_flags(repository, service):
    repository.login_response = AuthResponse(
        success=True,
        data={"id": 3, "name": "Ana", "token": "tok", "actived": "true", "email_confirmed": "false"},
    )

    assert service.login("ana@example.com", "pw").success is True
    assert service.current_user.actived is True
    assert service.current_user.email_confirmed is False
