# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Project use cases: listing, paging, create/update with images, deletion."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from portfolio.domain.catalog.entities import Project
from portfolio.domain.catalog.exceptions import (
    DuplicateProjectError,
    EmptyProjectNameError,
    NoProjectIdsError,
    NoProjectsFoundError,
    ProjectNotFoundError,
)
from portfolio.domain.catalog.repositories import ImageStore, ProjectRepository
from portfolio.shared.logging import logger

from .pagination import Page, paginate


@dataclass(slots=True, frozen=True)
class ImageUpload:
    filename: str
    data: bytes


@dataclass(slots=True, frozen=True)
class CreateProjectInput:
    name: str
    description: str | None = None
    tags: Sequence[str] | None = None
    image: ImageUpload | None = None


@dataclass(slots=True, frozen=True)
class UpdateProjectInput:
    name: str | None = None
    description: str | None = None
    tags: Sequence[str] | None = None
    image: ImageUpload | None = None


class ListProjectsUseCase:
    def __init__(self, *, projects: ProjectRepository) -> None:
        self._projects = projects

    def execute(self) -> Sequence[Project]:
        return self._projects.list_all()


class ListProjectsPageUseCase:
    def __init__(self, *, projects: ProjectRepository) -> None:
        self._projects = projects

    def execute(self, page: int, limit: int) -> Page[Project]:
        return paginate(
            page, limit, count=self._projects.count, fetch=self._projects.list_page
        )


class CreateProjectUseCase:
    def __init__(self, *, projects: ProjectRepository, images: ImageStore) -> None:
        self._projects = projects
        self._images = images

    def execute(self, data: CreateProjectInput) -> Project:
        name = (data.name or "").strip()
        if not name:
            raise EmptyProjectNameError()
        if self._projects.name_exists(name):
            raise DuplicateProjectError()

        image_path = None
        if data.image is not None:
            image_path = self._images.save(data.image.filename, data.image.data)

        project = Project(
            id=0,
            name=name,
            description=data.description,
            tags=tuple(data.tags or ()),
            image=image_path,
        )
        return self._projects.add(project)


class UpdateProjectUseCase:
    def __init__(self, *, projects: ProjectRepository, images: ImageStore) -> None:
        self._projects = projects
        self._images = images

    def execute(self, project_id: int, data: UpdateProjectInput) -> Project:
        existing = self._projects.get(project_id)
        if existing is None:
            raise ProjectNotFoundError(project_id)

        changes: dict[str, object] = {}
        if data.name is not None and data.name.strip():
            changes["name"] = data.name.strip()
        if data.description is not None:
            changes["description"] = data.description
        if data.tags is not None:
            changes["tags"] = tuple(data.tags)
        if data.image is not None:
            if existing.image:
                self._images.delete(existing.image)
            changes["image"] = self._images.save(data.image.filename, data.image.data)

        updated = dataclasses.replace(existing, **changes)
        return self._projects.update(updated)


class DeleteProjectUseCase:
    def __init__(self, *, projects: ProjectRepository, images: ImageStore) -> None:
        self._projects = projects
        self._images = images

    def execute(self, project_id: int) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        if project.image:
            self._images.delete(project.image)
        self._projects.delete(project_id)
        return project


class DeleteProjectsUseCase:
    def __init__(self, *, projects: ProjectRepository, images: ImageStore) -> None:
        self._projects = projects
        self._images = images

    def execute(self, project_ids: Sequence[int]) -> Sequence[Project]:
        if not project_ids:
            raise NoProjectIdsError()

        deleted = self._projects.delete_many(project_ids)
        if not deleted:
            raise NoProjectsFoundError()

        for project in deleted:
            if project.image:
                self._images.delete(project.image)
        logger.info(f"projects.delete_many: removed {len(deleted)} of {len(project_ids)}")
        return deleted
