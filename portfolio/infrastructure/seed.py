# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio.application.use_cases.users.register_user import RegisterUserUseCase
from portfolio.domain.users.entities import User
from portfolio.domain.users.exceptions import UserAlreadyExistsError
from portfolio.shared.config import AppConfig
from portfolio.shared.logging import logger


def seed_initial_user(config: AppConfig, register: RegisterUserUseCase) -> User | None:
    """Create the configured initial account on first start.

    Runs only when INITIAL_USER_USERNAME, INITIAL_USER_EMAIL and
    INITIAL_USER_PASSWORD are all set; an existing username is left untouched.
    """

    initial = config.initial_user
    username, email, password = initial.username, initial.email, initial.password
    if not (username and email and password):
        logger.info("seed: initial user not fully configured, skipping")
        return None

    try:
        user = register.execute(email, username, password)
    except UserAlreadyExistsError:
        logger.info(f"seed: initial user '{username}' already present")
        return None

    logger.info(f"seed: created initial user id={user.id}")
    return user


__all__ = ["seed_initial_user"]
