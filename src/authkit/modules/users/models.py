"""User document model."""

from enum import Enum

from beanie import Indexed
from pydantic import field_validator

from authkit.core.auth.backend import verify_password
from authkit.core.database.base import TimestampedDocument


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(TimestampedDocument):
    """An account that can authenticate.

    Attributes:
        name: Display name
        email: Unique, lower-cased email address
        password: Bcrypt hash of the user's password
        role: Access role
        is_email_verified: Whether the email address has been confirmed
    """

    name: str
    email: Indexed(str, unique=True)  # type: ignore[valid-type]
    password: str
    role: UserRole = UserRole.USER
    is_email_verified: bool = False

    class Settings:
        name = "users"

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    def is_password_match(self, password: str) -> bool:
        """Check a plain text password against the stored hash."""
        return verify_password(password, self.password)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role.value})>"
