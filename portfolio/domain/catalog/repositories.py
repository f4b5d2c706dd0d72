# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Project, Skill


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[Project]: ...
    def count(self) -> int: ...
    def list_page(self, *, offset: int, limit: int) -> Sequence[Project]: ...
    def get(self, project_id: int) -> Project | None: ...
    def name_exists(self, name: str) -> bool: ...
    def add(self, project: Project) -> Project: ...
    def update(self, project: Project) -> Project: ...
    def delete(self, project_id: int) -> None: ...
    def delete_many(self, project_ids: Sequence[int]) -> Sequence[Project]: ...


class SkillRepository(Protocol):
    def list_all(self) -> Sequence[Skill]: ...
    def count(self) -> int: ...
    def list_page(self, *, offset: int, limit: int) -> Sequence[Skill]: ...
    def get(self, skill_id: int) -> Skill | None: ...
    def name_exists(self, name: str) -> bool: ...
    def add(self, skill: Skill) -> Skill: ...
    def update(self, skill: Skill) -> Skill: ...
    def delete(self, skill_id: int) -> None: ...
    def delete_many(self, skill_ids: Sequence[int]) -> Sequence[Skill]: ...


class ImageStore(Protocol):
    def save(self, filename: str, data: bytes) -> str: ...
    def delete(self, public_path: str) -> None: ...
