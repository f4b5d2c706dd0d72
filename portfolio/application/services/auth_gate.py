# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request token validation.

A request is in exactly one of three states once the gate has run:

- ``NO_TOKEN``: the transport produced no bearer value.
- ``INVALID``: a bearer value was present but failed signature, issuer,
  audience, lifetime or subject checks.
- ``VALID``: the token verified; ``claims`` carries the decoded identity.

Which check failed is logged at debug level and never reported to callers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import UTC, datetime

import jwt

from portfolio.domain.users.entities import TokenClaims
from portfolio.shared.logging import logger

from .tokens import JWT_ALGORITHM, TokenSettings

_REQUIRED_CLAIMS = ["exp", "iat", "nbf", "iss", "aud", "sub"]


class AuthStatus(enum.Enum):
    NO_TOKEN = "no_token"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(slots=True, frozen=True)
class AuthState:
    status: AuthStatus
    claims: TokenClaims | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.status is AuthStatus.VALID


NO_TOKEN = AuthState(AuthStatus.NO_TOKEN)
INVALID = AuthState(AuthStatus.INVALID)


class AuthGate:
    def __init__(self, settings: TokenSettings) -> None:
        self._settings = settings

    def authenticate(self, bearer: str | None) -> AuthState:
        if not bearer:
            return NO_TOKEN
        try:
            payload = jwt.decode(
                bearer,
                self._settings.key,
                algorithms=[JWT_ALGORITHM],
                audience=self._settings.audience,
                issuer=self._settings.issuer,
                leeway=0,
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"auth.gate: rejected token ({type(exc).__name__})")
            return INVALID

        claims = self._to_claims(payload)
        if claims is None:
            return INVALID
        return AuthState(AuthStatus.VALID, claims)

    @staticmethod
    def _to_claims(payload: dict) -> TokenClaims | None:
        subject = payload.get("sub")
        if not isinstance(subject, str) or not (subject.isascii() and subject.isdigit()):
            logger.debug("auth.gate: rejected token (subject is not a user id)")
            return None
        try:
            return TokenClaims(
                subject=subject,
                name=str(payload.get("name") or ""),
                email=str(payload.get("email") or ""),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
            )
        except (TypeError, ValueError, OverflowError):
            logger.debug("auth.gate: rejected token (malformed timestamps)")
            return None


__all__ = ["AuthGate", "AuthState", "AuthStatus"]
