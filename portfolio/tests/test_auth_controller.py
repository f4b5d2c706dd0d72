from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from portfolio.application.services.auth_gate import AuthGate
from portfolio.application.services.tokens import TokenIssuer, TokenSettings
from portfolio.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from portfolio.application.use_cases.users.login_user import LoginResult, LoginUserUseCase
from portfolio.application.use_cases.users.register_user import RegisterUserUseCase
from portfolio.domain.users.entities import User
from portfolio.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from portfolio.interfaces.http.controllers.auth_controller import AuthController
from portfolio.interfaces.http.security import TokenTransport, configure_authentication
from portfolio.shared.config import load_config
from portfolio.shared.middleware.error_handler import configure_error_handling

ALICE = User(id=1, username="alice", email="alice@example.com", password_hash="hash")


@pytest.fixture()
def flask_app(token_settings: TokenSettings) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    configure_authentication(app, AuthGate(token_settings), TokenTransport())
    return app


def _controller(**overrides) -> AuthController:
    kwargs = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "current_user_use_case": MagicMock(),
        "config": load_config(),
    }
    kwargs.update(overrides)
    return AuthController(**kwargs)


def test_register_endpoint_returns_message(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, email: str, username: str, password: str) -> User:
            register_called["args"] = (email, username, password)
            return ALICE

    controller = _controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/register",
            json={"email": "alice@example.com", "username": "alice", "password": "s3cret!"},
        )

    assert response.status_code == 200
    assert response.get_json() == "User registered successfully"
    assert register_called["args"] == ("alice@example.com", "alice", "s3cret!")
    assert "Set-Cookie" not in response.headers


def test_register_duplicate_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/register",
            json={"email": "alice@example.com", "username": "alice", "password": "s3cret!"},
        )

    assert response.status_code == 400
    assert response.get_json()["message"] == "Username already exists"


@pytest.mark.parametrize(
    "body",
    [
        {"username": "alice", "password": "s3cret!"},
        {"email": "no-at-sign", "username": "alice", "password": "s3cret!"},
        {"email": "alice@example.com", "username": "   ", "password": "s3cret!"},
        {"email": "alice@example.com", "username": "alice", "password": ""},
    ],
)
def test_register_invalid_payload_returns_400(flask_app: Flask, body: dict) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/register", json=body)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_login_invalid_payload_returns_400(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller().as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/login", json={"usernameOrEmail": "alice"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert "password" in payload["context"]["fields"]


def test_login_sets_token_cookie(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = LoginResult(user=ALICE, token="tok.en.value")
    flask_app.register_blueprint(
        _controller(login_use_case=cast(LoginUserUseCase, login)).as_blueprint()
    )

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/login", json={"usernameOrEmail": "alice", "password": "s3cret!"}
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "message": "Login successful",
        "username": "alice",
        "email": "alice@example.com",
        "token": "tok.en.value",
    }
    login.execute.assert_called_once_with("alice", "s3cret!")
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("token=tok.en.value")
    assert "HttpOnly" in cookie
    assert "Secure" in cookie
    assert "SameSite=Strict" in cookie
    assert "Max-Age=86400" in cookie


def test_login_bad_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/login", json={"usernameOrEmail": "alice", "password": "nope"}
        )

    assert response.status_code == 401
    assert response.get_json()["message"] == "Invalid username/email or password"
    assert "Set-Cookie" not in response.headers


def test_me_requires_token(flask_app: Flask) -> None:
    current = MagicMock()
    flask_app.register_blueprint(_controller(current_user_use_case=current).as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthenticated"
    assert response.headers["WWW-Authenticate"] == "Bearer"
    current.execute.assert_not_called()


def test_me_with_bad_token(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller().as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/auth/me", headers={"Authorization": "Bearer nonsense"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_token"


def test_me_returns_profile(flask_app: Flask, token_settings: TokenSettings) -> None:
    current = MagicMock()
    current.execute.return_value = ALICE
    controller = _controller(current_user_use_case=cast(GetCurrentUserUseCase, current))
    flask_app.register_blueprint(controller.as_blueprint())
    token = TokenIssuer(token_settings).issue(ALICE)

    with flask_app.test_client() as client:
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.get_json() == {"Email": "alice@example.com", "Username": "alice"}
    claims = current.execute.call_args.args[0]
    assert claims.user_id == 1


def test_logout_clears_cookie_without_token(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller().as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/logout")

    assert response.status_code == 200
    assert response.get_json() == {"message": "Logged out successfully"}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("token=;")
    assert "Max-Age=0" in cookie or "Expires=Thu, 01 Jan 1970" in cookie
