"""Login and registration input models."""

import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_length(value: str, label: str, min_length: int) -> str:
    if not value:
        raise ValueError(f"{label} is required")
    if len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters")
    return value


def first_validation_message(error: ValidationError) -> str:
    """Return the first human-readable message of a validation error."""
    errors = error.errors()
    if not errors:
        return "Invalid input"
    return str(errors[0]["msg"]).removeprefix("Value error, ")


class LoginCredentials(BaseModel):
    """Credentials submitted on the login form."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return _check_length(v, "Username", 3)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_length(v, "Password", 4)


class RegistrationRequest(BaseModel):
    """Fields submitted on the registration form."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    username: str
    email: str
    password: str
    confirm_password: str

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return _check_length(v, "First name", 2)

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return _check_length(v, "Last name", 2)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return _check_length(v, "Username", 3)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not v:
            raise ValueError("Email is required")
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_length(v, "Password", 6)

    @model_validator(mode="after")
    def validate_confirmation(self) -> "RegistrationRequest":
        if not self.confirm_password:
            raise ValueError("Please confirm your password")
        if self.confirm_password != self.password:
            raise ValueError("Passwords must match")
        return self
