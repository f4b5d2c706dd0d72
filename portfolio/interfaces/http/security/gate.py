# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import Flask, g, request

from portfolio.application.services.auth_gate import AuthGate, AuthState, AuthStatus
from portfolio.domain.users.entities import TokenClaims
from portfolio.domain.users.exceptions import AuthenticationRequiredError, InvalidTokenError
from portfolio.shared.logging import logger

from .transport import TokenTransport

_UNSET = AuthState(AuthStatus.NO_TOKEN)


def configure_authentication(app: Flask, gate: AuthGate, transport: TokenTransport) -> None:
    """Run transport then gate ahead of every view, authenticated or not."""

    @app.before_request
    def _authenticate() -> None:
        bearer = transport.resolve(request.headers, request.cookies)
        state = gate.authenticate(bearer)
        g.auth = state
        if state.claims is not None:
            g.user_id = state.claims.user_id
        elif state.status is AuthStatus.INVALID:
            logger.info(f"auth: invalid token presented on {request.method} {request.path}")


def auth_state() -> AuthState:
    return getattr(g, "auth", _UNSET)


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        state = auth_state()
        if state.status is AuthStatus.NO_TOKEN:
            raise AuthenticationRequiredError()
        if state.status is AuthStatus.INVALID:
            raise InvalidTokenError()
        return f(*a, **kw)

    return inner


def current_claims() -> TokenClaims:
    """Claims of the verified caller; only valid inside an ``auth_required`` view."""
    claims = auth_state().claims
    if claims is None:
        raise InvalidTokenError()
    return claims


__all__ = ["auth_required", "auth_state", "configure_authentication", "current_claims"]
