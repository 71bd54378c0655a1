"""Pydantic schemas for user operations."""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

from authkit.core.constants import MAX_NAME_LENGTH, MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from authkit.modules.users.models import UserRole


def validate_password_complexity(password: str) -> str:
    """Require at least one letter and one digit.

    Raises:
        ValueError: If password doesn't meet requirements
    """
    if not re.search(r"[A-Za-z]", password) or not re.search(r"\d", password):
        raise ValueError("Password must contain at least 1 letter and 1 number")
    return password


class UserCreate(BaseModel):
    """Schema for creating a user (admin flow, role may be set)."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH)
    role: UserRole = UserRole.USER

    @field_validator("password")
    @classmethod
    def password_complexity(cls, v: str) -> str:
        return validate_password_complexity(v)


class UserRegister(BaseModel):
    """Schema for self-registration; role is always ``user``."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH)

    @field_validator("password")
    @classmethod
    def password_complexity(cls, v: str) -> str:
        return validate_password_complexity(v)


class UserUpdate(BaseModel):
    """Schema for partial user updates."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr | None = None
    password: str | None = Field(
        None, min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )

    @field_validator("password")
    @classmethod
    def password_complexity(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return validate_password_complexity(v)
