# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)

_MIN_PRODUCTION_KEY_BYTES = 32


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing or invalid."""


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///portfolio.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SECTION_CONFIG


class AuthConfig(BaseSettings):
    # Token signing; all three must be non-empty for the app to start.
    jwt_key: str = Field("", alias="JWT_KEY")
    jwt_issuer: str = Field("", alias="JWT_ISSUER")
    jwt_audience: str = Field("", alias="JWT_AUDIENCE")

    # Cookie transport
    cookie_name: str = Field("token", min_length=1, alias="AUTH_COOKIE_NAME")
    cookie_transport: bool = Field(True, alias="AUTH_COOKIE_TRANSPORT")
    cookie_overrides_header: bool = Field(True, alias="AUTH_COOKIE_OVERRIDES_HEADER")
    cookie_secure: bool = Field(True, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Strict", alias="COOKIE_SAMESITE")

    model_config = _SECTION_CONFIG

    @field_validator(
        "cookie_transport", "cookie_overrides_header", "cookie_secure", mode="before"
    )
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class StorageConfig(BaseSettings):
    uploads_dir: Path = Field(Path("uploads"), alias="UPLOADS_DIR")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class InitialUserConfig(BaseSettings):
    username: str | None = Field(None, alias="INITIAL_USER_USERNAME")
    email: str | None = Field(None, alias="INITIAL_USER_EMAIL")
    password: str | None = Field(None, alias="INITIAL_USER_PASSWORD")

    model_config = _SECTION_CONFIG


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _storage_config_factory() -> StorageConfig:
    return StorageConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _initial_user_config_factory() -> InitialUserConfig:
    return InitialUserConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    storage: StorageConfig = Field(default_factory=_storage_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    initial_user: InitialUserConfig = Field(default_factory=_initial_user_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if len(self.auth.jwt_key.encode("utf-8")) < _MIN_PRODUCTION_KEY_BYTES:
            print(
                "\n❌ CRITICAL SECURITY ERROR: JWT_KEY is too short for production!\n"
                f"   JWT_KEY must be at least {_MIN_PRODUCTION_KEY_BYTES} bytes of random data.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(48))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.auth.cookie_secure:
            warnings.append("⚠️  Cookie Secure flag is DISABLED (use HTTPS!)")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    try:
        return AppConfig()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration: {exc}") from exc


__all__ = ["AppConfig", "ConfigurationError", "load_config"]
