# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Turn request headers and cookies into a single bearer value.

Browsers carry the session in an httpOnly cookie; scripts send an
``Authorization: Bearer`` header. Both are folded into one value here so the
gate has a single input.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

BEARER_SCHEME = "bearer"


def bearer_from_header(value: str | None) -> str | None:
    if not value:
        return None
    scheme, _, credentials = value.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    credentials = credentials.strip()
    return credentials or None


@dataclass(slots=True, frozen=True)
class TokenTransport:
    cookie_name: str = "token"
    # When both are present the cookie wins unless this is switched off.
    cookie_overrides_header: bool = True

    def resolve(self, headers: Mapping[str, str], cookies: Mapping[str, str]) -> str | None:
        from_cookie = (cookies.get(self.cookie_name) or "").strip() or None
        from_header = bearer_from_header(headers.get("Authorization"))

        if self.cookie_overrides_header:
            return from_cookie or from_header
        return from_header or from_cookie


__all__ = ["BEARER_SCHEME", "TokenTransport", "bearer_from_header"]
