# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.auth_gate import AuthGate, AuthState, AuthStatus
from .services.password_hashing import WerkzeugPasswordHasher
from .services.tokens import TOKEN_LIFETIME, TokenIssuer, TokenSettings
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AuthGate",
    "AuthState",
    "AuthStatus",
    "GetCurrentUserUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "TOKEN_LIFETIME",
    "TokenIssuer",
    "TokenSettings",
    "WerkzeugPasswordHasher",
]
