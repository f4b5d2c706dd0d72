# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import auth_required, auth_state, configure_authentication, current_claims
from .transport import TokenTransport, bearer_from_header

__all__ = [
    "TokenTransport",
    "auth_required",
    "auth_state",
    "bearer_from_header",
    "configure_authentication",
    "current_claims",
]
