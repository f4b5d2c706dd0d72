# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from portfolio.domain.users.entities import User as DomainUser
from portfolio.domain.users.exceptions import UserAlreadyExistsError
from portfolio.domain.users.repositories import UserRepository
from portfolio.infrastructure.db.models import User
from portfolio.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_username_or_email(self, value: str) -> DomainUser | None:
        with session_scope() as session:
            row = (
                session.query(User)
                .filter(or_(User.username == value, User.email == value))
                .order_by(User.id.asc())
                .first()
            )
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                )
                if user.created_at is not None:
                    row.created_at = user.created_at
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race against a concurrent registration of the same name.
            raise UserAlreadyExistsError() from exc
