# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from portfolio.shared.errors.base import DomainError


class InvalidPaginationError(DomainError):
    code = "invalid_pagination"
    message = "Invalid page or limit. Both must be greater than 0."


class EmptyProjectNameError(DomainError):
    code = "project_name_empty"
    message = "Project name cannot be empty"


class DuplicateProjectError(DomainError):
    code = "project_exists"
    message = "Project already exists"


class ProjectNotFoundError(DomainError):
    code = "project_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Project not found"

    def __init__(self, project_id: int) -> None:
        super().__init__(context={"project_id": project_id})


class NoProjectIdsError(DomainError):
    code = "project_ids_missing"
    message = "No project IDs provided"


class NoProjectsFoundError(DomainError):
    code = "projects_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "No projects found with the provided IDs"


class EmptySkillNameError(DomainError):
    code = "skill_name_empty"
    message = "Skill name cannot be empty"


class DuplicateSkillError(DomainError):
    code = "skill_exists"
    message = "Skill already exists"


class SkillNotFoundError(DomainError):
    code = "skill_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Skill not found"

    def __init__(self, skill_id: int) -> None:
        super().__init__(context={"skill_id": skill_id})
