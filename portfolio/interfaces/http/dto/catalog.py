# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from portfolio.application.use_cases.catalog.pagination import Page


class ProjectDTO(BaseModel):
    id: int
    name: str
    image: str | None
    tags: list[str]
    description: str | None

    model_config = ConfigDict(from_attributes=True)


class SkillDTO(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class SkillRequestDTO(BaseModel):
    name: str = Field("", max_length=128)


class PageQueryDTO(BaseModel):
    page: int = 1
    limit: int = 10


class IdListDTO(BaseModel):
    ids: list[StrictInt]


def page_payload(page: Page[Any], item_dto: type[BaseModel]) -> dict[str, Any]:
    return {
        "data": [item_dto.model_validate(item).model_dump() for item in page.items],
        "currentPage": page.page,
        "limit": page.limit,
        "totalCount": page.total_count,
        "totalPages": page.total_pages,
    }


__all__ = [
    "IdListDTO",
    "PageQueryDTO",
    "ProjectDTO",
    "SkillDTO",
    "SkillRequestDTO",
    "page_payload",
]
