# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from portfolio.application.services.tokens import TokenIssuer
from portfolio.domain.users.entities import User
from portfolio.domain.users.exceptions import CorruptCredentialError, InvalidCredentialsError
from portfolio.domain.users.repositories import PasswordHasher, UserRepository
from portfolio.shared.logging import logger


@dataclass(slots=True, frozen=True)
class LoginResult:
    user: User
    token: str


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    def execute(self, username_or_email: str, password: str) -> LoginResult:
        user = self._users.find_by_username_or_email(username_or_email)
        if user is None or not self._password_matches(user, password):
            raise InvalidCredentialsError()

        token = self._token_issuer.issue(user)
        return LoginResult(user=user, token=token)

    def _password_matches(self, user: User, password: str) -> bool:
        try:
            return self._password_hasher.verify(password, user.password_hash)
        except CorruptCredentialError:
            logger.warning(f"auth.login: stored credential unreadable for user_id={user.id}")
            return False
