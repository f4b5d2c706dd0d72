# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:
    id: int
    username: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Identity claims decoded from a verified session token."""

    subject: str
    name: str
    email: str
    issued_at: datetime
    expires_at: datetime

    @property
    def user_id(self) -> int:
        return int(self.subject)
