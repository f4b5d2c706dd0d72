# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from portfolio.domain.catalog.entities import Skill
from portfolio.domain.catalog.exceptions import (
    DuplicateSkillError,
    EmptySkillNameError,
    SkillNotFoundError,
)
from portfolio.domain.catalog.repositories import SkillRepository

from .pagination import Page, paginate


class ListSkillsUseCase:
    def __init__(self, *, skills: SkillRepository) -> None:
        self._skills = skills

    def execute(self) -> Sequence[Skill]:
        return self._skills.list_all()


class ListSkillsPageUseCase:
    def __init__(self, *, skills: SkillRepository) -> None:
        self._skills = skills

    def execute(self, page: int, limit: int) -> Page[Skill]:
        return paginate(page, limit, count=self._skills.count, fetch=self._skills.list_page)


class CreateSkillUseCase:
    def __init__(self, *, skills: SkillRepository) -> None:
        self._skills = skills

    def execute(self, name: str) -> Skill:
        name = (name or "").strip()
        if not name:
            raise EmptySkillNameError()
        if self._skills.name_exists(name):
            raise DuplicateSkillError()
        return self._skills.add(Skill(id=0, name=name))


class UpdateSkillUseCase:
    def __init__(self, *, skills: SkillRepository) -> None:
        self._skills = skills

    def execute(self, skill_id: int, name: str) -> Skill:
        name = (name or "").strip()
        if not name:
            raise EmptySkillNameError(message="Updated skill name cannot be empty")
        if self._skills.get(skill_id) is None:
            raise SkillNotFoundError(skill_id)
        return self._skills.update(Skill(id=skill_id, name=name))


class DeleteSkillUseCase:
    def __init__(self, *, skills: SkillRepository) -> None:
        self._skills = skills

    def execute(self, skill_id: int) -> Skill:
        skill = self._skills.get(skill_id)
        if skill is None:
            raise SkillNotFoundError(skill_id)
        self._skills.delete(skill_id)
        return skill


class DeleteSkillsUseCase:
    """Bulk delete; ids that do not exist are skipped."""

    def __init__(self, *, skills: SkillRepository) -> None:
        self._skills = skills

    def execute(self, skill_ids: Sequence[int]) -> Sequence[Skill]:
        if not skill_ids:
            return []
        return self._skills.delete_many(skill_ids)
