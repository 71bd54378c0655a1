"""User management module."""

from authkit.modules.users.models import User, UserRole
from authkit.modules.users.repos import UserRepository
from authkit.modules.users.services import UserService


__all__ = [
    "User",
    "UserRepository",
    "UserRole",
    "UserService",
]
