from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


def _not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("missing", "Field cannot be empty", {})
    return value


class RegisterRequestDTO(BaseModel):
    email: str = Field(min_length=3, max_length=256)
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = _not_blank(value).strip()
        if "@" not in value:
            raise PydanticCustomError("email_invalid", "Email must contain '@'", {})
        return value

    @field_validator("username", "password")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class LoginRequestDTO(BaseModel):
    username_or_email: str = Field(alias="usernameOrEmail", min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("username_or_email", "password")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class LoginResponseDTO(BaseModel):
    message: str = "Login successful"
    username: str
    email: str
    token: str


class CurrentUserDTO(BaseModel):
    email: str = Field(serialization_alias="Email")
    username: str = Field(serialization_alias="Username")


class MessageDTO(BaseModel):
    message: str
