"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from portfolio.application.services.auth_gate import AuthGate
from portfolio.application.services.password_hashing import WerkzeugPasswordHasher
from portfolio.application.services.tokens import TokenIssuer, TokenSettings
from portfolio.application.use_cases.catalog.projects import (
    CreateProjectUseCase,
    DeleteProjectsUseCase,
    DeleteProjectUseCase,
    ListProjectsPageUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from portfolio.application.use_cases.catalog.skills import (
    CreateSkillUseCase,
    DeleteSkillsUseCase,
    DeleteSkillUseCase,
    ListSkillsPageUseCase,
    ListSkillsUseCase,
    UpdateSkillUseCase,
)
from portfolio.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from portfolio.application.use_cases.users.login_user import LoginUserUseCase
from portfolio.application.use_cases.users.register_user import RegisterUserUseCase
from portfolio.infrastructure.db import SessionLocal
from portfolio.infrastructure.repositories.catalog import (
    SqlAlchemyProjectRepository,
    SqlAlchemySkillRepository,
)
from portfolio.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from portfolio.infrastructure.storage import LocalImageStorage
from portfolio.interfaces.http.controllers.auth_controller import AuthController
from portfolio.interfaces.http.controllers.misc_controller import MiscController
from portfolio.interfaces.http.controllers.projects_controller import ProjectsController
from portfolio.interfaces.http.controllers.skills_controller import SkillsController
from portfolio.interfaces.http.security import TokenTransport
from portfolio.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    # Auth services

    @cached_property
    def token_settings(self) -> TokenSettings:
        return TokenSettings.from_config(self.config)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> TokenIssuer:
        return TokenIssuer(self.token_settings)

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.token_settings)

    @cached_property
    def token_transport(self) -> TokenTransport:
        auth = self.config.auth
        return TokenTransport(
            cookie_name=auth.cookie_name,
            cookie_overrides_header=auth.cookie_overrides_header,
        )

    # Repositories and storage

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def project_repository(self) -> SqlAlchemyProjectRepository:
        return SqlAlchemyProjectRepository(SessionLocal)

    @cached_property
    def skill_repository(self) -> SqlAlchemySkillRepository:
        return SqlAlchemySkillRepository(SessionLocal)

    @cached_property
    def image_storage(self) -> LocalImageStorage:
        return LocalImageStorage(self.config.storage.uploads_dir)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
            config=self.config,
        )

    @cached_property
    def projects_controller(self) -> ProjectsController:
        projects = self.project_repository
        images = self.image_storage
        return ProjectsController(
            list_projects=ListProjectsUseCase(projects=projects),
            list_projects_page=ListProjectsPageUseCase(projects=projects),
            create_project=CreateProjectUseCase(projects=projects, images=images),
            update_project=UpdateProjectUseCase(projects=projects, images=images),
            delete_project=DeleteProjectUseCase(projects=projects, images=images),
            delete_projects=DeleteProjectsUseCase(projects=projects, images=images),
        )

    @cached_property
    def skills_controller(self) -> SkillsController:
        skills = self.skill_repository
        return SkillsController(
            list_skills=ListSkillsUseCase(skills=skills),
            list_skills_page=ListSkillsPageUseCase(skills=skills),
            create_skill=CreateSkillUseCase(skills=skills),
            update_skill=UpdateSkillUseCase(skills=skills),
            delete_skill=DeleteSkillUseCase(skills=skills),
            delete_skills=DeleteSkillsUseCase(skills=skills),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(uploads_dir=self.config.storage.uploads_dir)


container = Container()
