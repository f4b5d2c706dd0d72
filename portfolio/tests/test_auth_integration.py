from __future__ import annotations

from datetime import UTC, datetime

import jwt
import pytest
from flask import Flask
from flask.testing import FlaskClient

from portfolio.app import create_app
from portfolio.container import Container
from portfolio.infrastructure.db import ENGINE, Base, SessionLocal
from portfolio.infrastructure.db.models import AuditLog, User
from portfolio.shared.config import AppConfig, ConfigurationError, load_config


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def app() -> Flask:
    return create_app()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def _register(client: FlaskClient, username: str = "alice", email: str = "a@x.io"):
    return client.post(
        "/auth/register",
        json={"email": email, "username": username, "password": "s3cret!"},
    )


def _login(client: FlaskClient, login: str = "alice", password: str = "s3cret!"):
    return client.post("/auth/login", json={"usernameOrEmail": login, "password": password})


def test_register_login_me_flow(client: FlaskClient) -> None:
    assert _register(client).status_code == 200

    login = _login(client)
    assert login.status_code == 200
    body = login.get_json()
    assert body["message"] == "Login successful"
    assert body["username"] == "alice"
    assert body["email"] == "a@x.io"
    token = body["token"]
    assert token.count(".") == 2

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.get_json() == {"Email": "a@x.io", "Username": "alice"}

    protected = client.get("/auth/protected", headers={"Authorization": f"Bearer {token}"})
    assert protected.status_code == 200
    assert protected.get_json() == "This is a protected endpoint"


def test_login_by_email(client: FlaskClient) -> None:
    _register(client)

    assert _login(client, login="a@x.io").status_code == 200


def test_password_is_stored_hashed(client: FlaskClient) -> None:
    _register(client)

    session = SessionLocal()
    try:
        row = session.query(User).filter(User.username == "alice").one()
        assert row.password_hash != "s3cret!"
        assert "s3cret!" not in row.password_hash
    finally:
        session.close()
        SessionLocal.remove()


def test_cookie_flags_on_login(client: FlaskClient) -> None:
    _register(client)

    cookie = _login(client).headers["Set-Cookie"]

    assert cookie.startswith("token=")
    assert "HttpOnly" in cookie
    assert "Secure" in cookie
    assert "SameSite=Strict" in cookie


def test_cookie_alone_authenticates(client: FlaskClient) -> None:
    _register(client)
    token = _login(client).get_json()["token"]
    client.delete_cookie("token")

    client.set_cookie("token", token)
    me = client.get("/auth/me")

    assert me.status_code == 200
    assert me.get_json()["Username"] == "alice"


def test_cookie_overrides_header(client: FlaskClient) -> None:
    _register(client)
    token = _login(client).get_json()["token"]
    client.delete_cookie("token")

    client.set_cookie("token", "garbage")
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert me.status_code == 401
    assert me.get_json()["error"] == "invalid_token"


def test_no_token_is_unauthorized(client: FlaskClient) -> None:
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.get_json()["message"] == "Authentication required"


def test_duplicate_username_rejected(client: FlaskClient) -> None:
    assert _register(client).status_code == 200

    duplicate = _register(client, email="other@x.io")

    assert duplicate.status_code == 400
    assert duplicate.get_json()["message"] == "Username already exists"


def test_wrong_password_and_unknown_user_look_the_same(client: FlaskClient) -> None:
    _register(client)

    wrong = _login(client, password="nope")
    unknown = _login(client, login="mallory")

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json()


def test_deleted_user_with_valid_token(client: FlaskClient) -> None:
    _register(client)
    token = _login(client).get_json()["token"]

    session = SessionLocal()
    try:
        session.query(User).delete()
        session.commit()
    finally:
        session.close()
        SessionLocal.remove()

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 404
    assert me.get_json()["message"] == "User not found"


def test_stale_cookie_does_not_block_login(client: FlaskClient) -> None:
    _register(client)
    client.set_cookie("token", "stale.cookie.value")

    assert _login(client).status_code == 200


def test_logout_clears_cookie_but_token_stays_valid(client: FlaskClient) -> None:
    _register(client)
    token = _login(client).get_json()["token"]

    logout = client.post("/auth/logout", headers={"Authorization": f"Bearer {token}"})
    assert logout.status_code == 200
    assert logout.get_json() == {"message": "Logged out successfully"}

    client.delete_cookie("token")
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200


def test_auth_events_are_audited(client: FlaskClient) -> None:
    _register(client)
    _login(client)
    _login(client, password="nope")

    session = SessionLocal()
    try:
        actions = [row.action for row in session.query(AuditLog).order_by(AuditLog.id)]
    finally:
        session.close()
        SessionLocal.remove()

    assert actions == ["register", "login_success", "login_failed"]


def test_health(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_security_headers(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def _config_without(field: str) -> AppConfig:
    config = load_config()
    return config.model_copy(update={"auth": config.auth.model_copy(update={field: ""})})


@pytest.mark.parametrize("field", ["jwt_key", "jwt_issuer", "jwt_audience"])
def test_startup_fails_without_token_settings(field: str) -> None:
    with pytest.raises(ConfigurationError, match=field):
        create_app(Container(_config_without(field)))


def test_non_ascii_subject_is_rejected(client: FlaskClient) -> None:
    auth = load_config().auth
    now = int(datetime.now(UTC).timestamp())
    token = jwt.encode(
        {
            "sub": "²",
            "iss": auth.jwt_issuer,
            "aud": auth.jwt_audience,
            "iat": now,
            "nbf": now,
            "exp": now + 60,
        },
        auth.jwt_key,
        algorithm="HS256",
    )

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_token"
