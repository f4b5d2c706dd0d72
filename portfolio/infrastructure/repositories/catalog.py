# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from portfolio.domain.catalog.entities import Project as DomainProject
from portfolio.domain.catalog.entities import Skill as DomainSkill
from portfolio.domain.catalog.repositories import ProjectRepository, SkillRepository
from portfolio.infrastructure.db.models import Project, Skill
from portfolio.infrastructure.unit_of_work import unit_of_work_scope


def _project_to_domain(row: Project) -> DomainProject:
    return DomainProject(
        id=row.id,
        name=row.name,
        description=row.description,
        tags=tuple(row.tags or ()),
        image=row.image,
    )


def _skill_to_domain(row: Skill) -> DomainSkill:
    return DomainSkill(id=row.id, name=row.name)


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainProject]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Project).order_by(Project.id.asc()).all()
            return [_project_to_domain(row) for row in rows]

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return session.query(Project).count()

    def list_page(self, *, offset: int, limit: int) -> Sequence[DomainProject]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Project)
                .order_by(Project.id.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
            return [_project_to_domain(row) for row in rows]

    def get(self, project_id: int) -> DomainProject | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Project, project_id)
            return _project_to_domain(row) if row else None

    def name_exists(self, name: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            found = (
                session.query(Project.id)
                .filter(func.lower(Project.name) == name.lower())
                .first()
            )
            return found is not None

    def add(self, project: DomainProject) -> DomainProject:
        with unit_of_work_scope(self._session_factory) as session:
            row = Project(
                name=project.name,
                description=project.description,
                tags=list(project.tags),
                image=project.image,
            )
            session.add(row)
            session.flush()
            return _project_to_domain(row)

    def update(self, project: DomainProject) -> DomainProject:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Project, project.id)
            if row is None:
                raise LookupError(f"project {project.id} vanished during update")
            row.name = project.name
            row.description = project.description
            row.tags = list(project.tags)
            row.image = project.image
            session.flush()
            return _project_to_domain(row)

    def delete(self, project_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.query(Project).filter(Project.id == project_id).delete()

    def delete_many(self, project_ids: Sequence[int]) -> Sequence[DomainProject]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Project).filter(Project.id.in_(list(project_ids))).all()
            deleted = [_project_to_domain(row) for row in rows]
            for row in rows:
                session.delete(row)
            return deleted


class SqlAlchemySkillRepository(SkillRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainSkill]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Skill).order_by(Skill.id.asc()).all()
            return [_skill_to_domain(row) for row in rows]

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return session.query(Skill).count()

    def list_page(self, *, offset: int, limit: int) -> Sequence[DomainSkill]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Skill)
                .order_by(Skill.id.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
            return [_skill_to_domain(row) for row in rows]

    def get(self, skill_id: int) -> DomainSkill | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Skill, skill_id)
            return _skill_to_domain(row) if row else None

    def name_exists(self, name: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            found = (
                session.query(Skill.id).filter(func.lower(Skill.name) == name.lower()).first()
            )
            return found is not None

    def add(self, skill: DomainSkill) -> DomainSkill:
        with unit_of_work_scope(self._session_factory) as session:
            row = Skill(name=skill.name)
            session.add(row)
            session.flush()
            return _skill_to_domain(row)

    def update(self, skill: DomainSkill) -> DomainSkill:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Skill, skill.id)
            if row is None:
                raise LookupError(f"skill {skill.id} vanished during update")
            row.name = skill.name
            session.flush()
            return _skill_to_domain(row)

    def delete(self, skill_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.query(Skill).filter(Skill.id == skill_id).delete()

    def delete_many(self, skill_ids: Sequence[int]) -> Sequence[DomainSkill]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Skill).filter(Skill.id.in_(list(skill_ids))).all()
            deleted = [_skill_to_domain(row) for row in rows]
            for row in rows:
                session.delete(row)
            return deleted
