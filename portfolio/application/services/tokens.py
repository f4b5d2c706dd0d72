# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from portfolio.domain.users.entities import User
from portfolio.shared.config import AppConfig, ConfigurationError

JWT_ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=24)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class TokenSettings:
    key: str
    issuer: str
    audience: str

    def __post_init__(self) -> None:
        missing = [name for name in ("key", "issuer", "audience") if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                "token settings must be non-empty: " + ", ".join(f"jwt_{m}" for m in missing)
            )

    @classmethod
    def from_config(cls, config: AppConfig) -> TokenSettings:
        return cls(
            key=config.auth.jwt_key,
            issuer=config.auth.jwt_issuer,
            audience=config.auth.jwt_audience,
        )


class TokenIssuer:
    def __init__(self, settings: TokenSettings, *, clock: Clock = utcnow) -> None:
        self._settings = settings
        self._clock = clock

    def issue(self, user: User) -> str:
        now = self._clock().replace(microsecond=0)
        expires_at = now + TOKEN_LIFETIME
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "name": user.username,
            "email": user.email,
            "iss": self._settings.issuer,
            "aud": self._settings.audience,
            "iat": int(now.timestamp()),
            "nbf": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._settings.key, algorithm=JWT_ALGORITHM)


__all__ = ["JWT_ALGORITHM", "TOKEN_LIFETIME", "TokenIssuer", "TokenSettings", "utcnow"]
