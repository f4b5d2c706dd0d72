# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError
from werkzeug.datastructures import FileStorage

from portfolio.application.use_cases.catalog.projects import (
    CreateProjectInput,
    CreateProjectUseCase,
    DeleteProjectsUseCase,
    DeleteProjectUseCase,
    ImageUpload,
    ListProjectsPageUseCase,
    ListProjectsUseCase,
    UpdateProjectInput,
    UpdateProjectUseCase,
)
from portfolio.domain.catalog.exceptions import InvalidPaginationError, NoProjectIdsError
from portfolio.infrastructure.audit import AuditAction, audit_log
from portfolio.interfaces.http.dto.catalog import IdListDTO, PageQueryDTO, ProjectDTO, page_payload
from portfolio.interfaces.http.security import auth_required, current_claims


def _dump(project) -> dict:
    return ProjectDTO.model_validate(project).model_dump()


def _image_from_request() -> ImageUpload | None:
    file: FileStorage | None = request.files.get("image")
    if file is None or not file.filename:
        return None
    return ImageUpload(filename=file.filename, data=file.read())


def _tags_from_request() -> list[str] | None:
    if "tags" not in request.form:
        return None
    return [tag.strip() for tag in request.form.getlist("tags") if tag.strip()]


class ProjectsController:
    def __init__(
        self,
        *,
        list_projects: ListProjectsUseCase,
        list_projects_page: ListProjectsPageUseCase,
        create_project: CreateProjectUseCase,
        update_project: UpdateProjectUseCase,
        delete_project: DeleteProjectUseCase,
        delete_projects: DeleteProjectsUseCase,
    ) -> None:
        self._list = list_projects
        self._list_page = list_projects_page
        self._create = create_project
        self._update = update_project
        self._delete = delete_project
        self._delete_many = delete_projects

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("projects", __name__, url_prefix="/projects")
        bp.add_url_rule("", view_func=self.list_projects, methods=["GET"])
        bp.add_url_rule("/paged", view_func=self.list_paged, methods=["GET"])
        bp.add_url_rule("", view_func=self.create_project, methods=["POST"])
        bp.add_url_rule("/<int:project_id>", view_func=self.update_project, methods=["PUT"])
        bp.add_url_rule("/<int:project_id>", view_func=self.delete_project, methods=["DELETE"])
        bp.add_url_rule("/delete-multiple", view_func=self.delete_many, methods=["POST"])
        return bp

    def list_projects(self) -> Response:
        return jsonify({"data": [_dump(p) for p in self._list.execute()]})

    def list_paged(self) -> Response:
        try:
            query = PageQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise InvalidPaginationError() from exc
        page = self._list_page.execute(query.page, query.limit)
        return jsonify(page_payload(page, ProjectDTO))

    @auth_required
    def create_project(self) -> tuple[Response, int]:
        data = CreateProjectInput(
            name=request.form.get("name", ""),
            description=request.form.get("description"),
            tags=_tags_from_request(),
            image=_image_from_request(),
        )
        project = self._create.execute(data)
        audit_log(
            AuditAction.PROJECT_CREATED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"project_id": project.id, "name": project.name},
        )
        return jsonify({"message": "Project created successfully", "project": _dump(project)}), 201

    @auth_required
    def update_project(self, project_id: int) -> Response:
        data = UpdateProjectInput(
            name=request.form.get("name"),
            description=request.form.get("description"),
            tags=_tags_from_request(),
            image=_image_from_request(),
        )
        project = self._update.execute(project_id, data)
        audit_log(
            AuditAction.PROJECT_UPDATED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"project_id": project.id},
        )
        return jsonify({"message": "Project updated successfully", "project": _dump(project)})

    @auth_required
    def delete_project(self, project_id: int) -> Response:
        project = self._delete.execute(project_id)
        audit_log(
            AuditAction.PROJECT_DELETED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"project_ids": [project.id]},
        )
        return jsonify({"message": "Project deleted successfully", "project": _dump(project)})

    @auth_required
    def delete_many(self) -> Response:
        try:
            ids = IdListDTO(ids=request.get_json(silent=True)).ids
        except ValidationError as exc:
            raise NoProjectIdsError() from exc

        deleted = self._delete_many.execute(ids)
        audit_log(
            AuditAction.PROJECT_DELETED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"project_ids": [p.id for p in deleted]},
        )
        return jsonify(
            {
                "message": f"{len(deleted)} projects deleted successfully",
                "deletedProjects": [_dump(p) for p in deleted],
            }
        )
