# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from portfolio.domain.catalog.exceptions import InvalidPaginationError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    page: int
    limit: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit)


def paginate(
    page: int,
    limit: int,
    *,
    count: Callable[[], int],
    fetch: Callable[..., Sequence[T]],
) -> Page[T]:
    """Load one page, newest first. Both ``page`` and ``limit`` start at 1."""

    if page < 1 or limit < 1:
        raise InvalidPaginationError()
    total = count()
    items = fetch(offset=(page - 1) * limit, limit=limit)
    return Page(items=items, page=page, limit=limit, total_count=total)
