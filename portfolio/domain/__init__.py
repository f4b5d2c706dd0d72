# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainError, InvariantViolation
from .catalog.entities import Project, Skill
from .users.entities import User

__all__ = [
    "DomainError",
    "InvariantViolation",
    "Project",
    "Skill",
    "User",
]
