# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from portfolio.application.use_cases.catalog.skills import (
    CreateSkillUseCase,
    DeleteSkillsUseCase,
    DeleteSkillUseCase,
    ListSkillsPageUseCase,
    ListSkillsUseCase,
    UpdateSkillUseCase,
)
from portfolio.domain.catalog.exceptions import InvalidPaginationError
from portfolio.infrastructure.audit import AuditAction, audit_log
from portfolio.interfaces.http.dto.catalog import (
    IdListDTO,
    PageQueryDTO,
    SkillDTO,
    SkillRequestDTO,
    page_payload,
)
from portfolio.interfaces.http.security import auth_required, current_claims
from portfolio.shared.errors.validation import raise_validation_error


def _dump(skill) -> dict:
    return SkillDTO.model_validate(skill).model_dump()


def _skill_request() -> SkillRequestDTO:
    try:
        return SkillRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class SkillsController:
    def __init__(
        self,
        *,
        list_skills: ListSkillsUseCase,
        list_skills_page: ListSkillsPageUseCase,
        create_skill: CreateSkillUseCase,
        update_skill: UpdateSkillUseCase,
        delete_skill: DeleteSkillUseCase,
        delete_skills: DeleteSkillsUseCase,
    ) -> None:
        self._list = list_skills
        self._list_page = list_skills_page
        self._create = create_skill
        self._update = update_skill
        self._delete = delete_skill
        self._delete_many = delete_skills

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("skills", __name__, url_prefix="/skills")
        bp.add_url_rule("", view_func=self.list_skills, methods=["GET"])
        bp.add_url_rule("/paged", view_func=self.list_paged, methods=["GET"])
        bp.add_url_rule("", view_func=self.create_skill, methods=["POST"])
        bp.add_url_rule("/<int:skill_id>", view_func=self.update_skill, methods=["PUT"])
        bp.add_url_rule("/<int:skill_id>", view_func=self.delete_skill, methods=["DELETE"])
        bp.add_url_rule("/delete-multiple", view_func=self.delete_many, methods=["POST"])
        return bp

    def list_skills(self) -> Response:
        return jsonify({"data": [_dump(s) for s in self._list.execute()]})

    def list_paged(self) -> Response:
        try:
            query = PageQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise InvalidPaginationError() from exc
        page = self._list_page.execute(query.page, query.limit)
        return jsonify(page_payload(page, SkillDTO))

    @auth_required
    def create_skill(self) -> tuple[Response, int]:
        skill = self._create.execute(_skill_request().name)
        audit_log(
            AuditAction.SKILL_CREATED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"skill_id": skill.id, "name": skill.name},
        )
        return jsonify({"message": "Skill created successfully", "skill": _dump(skill)}), 201

    @auth_required
    def update_skill(self, skill_id: int) -> Response:
        skill = self._update.execute(skill_id, _skill_request().name)
        audit_log(
            AuditAction.SKILL_UPDATED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"skill_id": skill.id, "name": skill.name},
        )
        return jsonify({"message": "Skill updated successfully", "skill": _dump(skill)})

    @auth_required
    def delete_skill(self, skill_id: int) -> Response:
        skill = self._delete.execute(skill_id)
        audit_log(
            AuditAction.SKILL_DELETED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"skill_ids": [skill.id]},
        )
        return jsonify({"message": "Skill deleted successfully", "skill": _dump(skill)})

    @auth_required
    def delete_many(self) -> Response:
        try:
            ids = IdListDTO(ids=request.get_json(silent=True)).ids
        except ValidationError as exc:
            raise_validation_error(exc)

        deleted = self._delete_many.execute(ids)
        audit_log(
            AuditAction.SKILL_DELETED,
            user_id=current_claims().user_id,
            ip_address=request.remote_addr,
            details={"skill_ids": [s.id for s in deleted]},
        )
        return jsonify({"message": "Skills deleted successfully"})
