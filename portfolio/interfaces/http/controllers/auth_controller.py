# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from portfolio.application.services.tokens import TOKEN_LIFETIME
from portfolio.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from portfolio.application.use_cases.users.login_user import LoginUserUseCase
from portfolio.application.use_cases.users.register_user import RegisterUserUseCase
from portfolio.domain.users.exceptions import InvalidCredentialsError
from portfolio.infrastructure.audit import AuditAction, audit_log
from portfolio.interfaces.http.dto.auth import (
    CurrentUserDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    MessageDTO,
    RegisterRequestDTO,
)
from portfolio.interfaces.http.security import auth_state, auth_required, current_claims
from portfolio.shared.config import AppConfig
from portfolio.shared.errors.validation import raise_validation_error
from portfolio.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        config: AppConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case
        self._config = config

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.email, dto.username, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=_get_client_ip(),
            details={"username": dto.username},
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify("User registered successfully"), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()

        try:
            result = self._login_use_case.execute(dto.username_or_email, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                user_id=None,
                ip_address=ip_address,
                details={"login": dto.username_or_email},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=result.user.id,
            ip_address=ip_address,
            details={"username": result.user.username},
            success=True,
        )

        payload = LoginResponseDTO(
            username=result.user.username,
            email=result.user.email,
            token=result.token,
        ).model_dump()
        response = jsonify(payload)

        auth = self._config.auth
        if auth.cookie_transport:
            max_age = int(TOKEN_LIFETIME.total_seconds())
            response.set_cookie(
                auth.cookie_name,
                result.token,
                max_age=max_age,
                httponly=True,
                secure=auth.cookie_secure,
                samesite=auth.cookie_samesite,
            )
        logger.info(f"auth.login: ok user_id={result.user.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        # Stateless tokens: only the cookie goes away, the token value stays
        # valid until it expires.
        state = auth_state()
        user_id = state.claims.user_id if state.claims else None

        audit_log(
            AuditAction.LOGOUT,
            user_id=user_id,
            ip_address=_get_client_ip(),
            details={},
            success=True,
        )

        response = jsonify(MessageDTO(message="Logged out successfully").model_dump())
        auth = self._config.auth
        response.delete_cookie(
            auth.cookie_name,
            httponly=True,
            secure=auth.cookie_secure,
            samesite=auth.cookie_samesite,
        )
        logger.info(f"auth.logout: ok user_id={user_id}")
        return response, 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(current_claims())
        payload = CurrentUserDTO(email=user.email, username=user.username)
        return jsonify(payload.model_dump(by_alias=True)), 200

    @auth_required
    def protected(self) -> tuple[Response, int]:
        return jsonify("This is a protected endpoint"), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        bp.add_url_rule("/protected", view_func=self.protected, methods=["GET"])
        return bp
