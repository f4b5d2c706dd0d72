# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio.domain.users.entities import TokenClaims, User
from portfolio.domain.users.exceptions import UserNotFoundError
from portfolio.domain.users.repositories import UserRepository


class GetCurrentUserUseCase:
    """Re-read the persisted identity behind a verified token."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, claims: TokenClaims) -> User:
        user = self._users.find_by_id(claims.user_id)
        if user is None:
            raise UserNotFoundError()
        return user
