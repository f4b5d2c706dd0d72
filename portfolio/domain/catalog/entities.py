# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Portfolio content shown on the public site."""

from __future__ import annotations

from dataclasses import dataclass, field

from portfolio.domain.exceptions import InvariantViolation


def _require_name(name: str) -> None:
    if not name or not name.strip():
        raise InvariantViolation("name cannot be empty", field="name")


@dataclass(slots=True, frozen=True)
class Project:
    """A showcased project, optionally illustrated by an uploaded image."""

    id: int
    name: str
    description: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    image: str | None = None

    def __post_init__(self) -> None:
        _require_name(self.name)
        object.__setattr__(self, "tags", tuple(self.tags))


@dataclass(slots=True, frozen=True)
class Skill:
    id: int
    name: str

    def __post_init__(self) -> None:
        _require_name(self.name)
