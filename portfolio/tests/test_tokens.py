from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from portfolio.application.services.tokens import (
    JWT_ALGORITHM,
    TOKEN_LIFETIME,
    TokenIssuer,
    TokenSettings,
)
from portfolio.domain.users.entities import User
from portfolio.shared.config import ConfigurationError

ALICE = User(id=7, username="alice", email="a@x.io", password_hash="hash")


def _decode(token: str, settings: TokenSettings) -> dict:
    return jwt.decode(
        token,
        settings.key,
        algorithms=[JWT_ALGORITHM],
        audience=settings.audience,
        issuer=settings.issuer,
    )


def test_issued_token_carries_identity_claims(token_settings: TokenSettings) -> None:
    token = TokenIssuer(token_settings).issue(ALICE)

    claims = _decode(token, token_settings)

    assert claims["sub"] == "7"
    assert claims["name"] == "alice"
    assert claims["email"] == "a@x.io"
    assert claims["iss"] == token_settings.issuer
    assert claims["aud"] == token_settings.audience


def test_token_expires_after_one_day(token_settings: TokenSettings) -> None:
    fixed = datetime(2025, 3, 1, 12, 0, 0, 500_000, tzinfo=UTC)
    issuer = TokenIssuer(token_settings, clock=lambda: fixed)

    token = issuer.issue(ALICE)
    claims = jwt.decode(token, options={"verify_signature": False})

    assert TOKEN_LIFETIME == timedelta(hours=24)
    assert claims["iat"] == int(fixed.replace(microsecond=0).timestamp())
    assert claims["exp"] - claims["iat"] == 24 * 3600
    assert claims["nbf"] == claims["iat"]


def test_token_is_hs256(token_settings: TokenSettings) -> None:
    token = TokenIssuer(token_settings).issue(ALICE)

    assert jwt.get_unverified_header(token)["alg"] == "HS256"


@pytest.mark.parametrize("field", ["key", "issuer", "audience"])
def test_empty_settings_are_rejected(field: str) -> None:
    values = {"key": "k" * 40, "issuer": "iss", "audience": "aud"}
    values[field] = ""

    with pytest.raises(ConfigurationError):
        TokenSettings(**values)
