"""User service for business logic."""

from typing import Any

import structlog
from beanie import PydanticObjectId

from authkit.core.auth.backend import hash_password
from authkit.core.database.pagination import QueryOptions, QueryResult
from authkit.core.errors import ConflictError, NotFoundError
from authkit.modules.users.models import User, UserRole
from authkit.modules.users.repos import UserRepository
from authkit.modules.users.schemas import UserCreate, UserRegister, UserUpdate


logger = structlog.get_logger()


class UserService:
    """Service for user management operations.

    Contains business logic for user CRUD operations,
    email uniqueness, and password hashing.
    """

    def __init__(self, repo: UserRepository) -> None:
        self.repo = repo

    async def create_user(self, data: UserCreate) -> User:
        """Create a new user.

        Raises:
            ConflictError: If the email is already taken
        """
        if await self.repo.is_email_taken(data.email):
            raise ConflictError(
                "Email already taken",
                error_code="email_taken",
                details={"email": data.email},
            )

        user = await self.repo.create(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
        )
        logger.info("user_created", user_id=str(user.id), role=user.role.value)
        return user

    async def register_user(self, data: UserRegister) -> User:
        """Create a user through self-registration, always with the ``user`` role."""
        return await self.create_user(
            UserCreate(
                name=data.name,
                email=data.email,
                password=data.password,
                role=UserRole.USER,
            )
        )

    async def query_users(
        self, filter: dict[str, Any], options: QueryOptions
    ) -> QueryResult[User]:
        return await self.repo.query(filter, options)

    async def get_user_by_id(self, user_id: PydanticObjectId | str) -> User | None:
        return await self.repo.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self.repo.get_by_email(email)

    async def update_user_by_id(
        self, user_id: PydanticObjectId | str, data: UserUpdate
    ) -> User:
        """Apply a partial update.

        Raises:
            NotFoundError: If the user doesn't exist
            ConflictError: If the new email belongs to another user
        """
        user = await self._get_or_raise(user_id)

        if data.email and await self.repo.is_email_taken(data.email, exclude_user_id=user.id):
            raise ConflictError(
                "Email already taken",
                error_code="email_taken",
                details={"email": data.email},
            )

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in changes:
            changes["email"] = changes["email"].strip().lower()
        if "password" in changes:
            changes["password"] = hash_password(changes["password"])
        for field, value in changes.items():
            setattr(user, field, value)

        user = await self.repo.update(user)
        logger.info("user_updated", user_id=str(user.id), fields=sorted(changes))
        return user

    async def delete_user_by_id(self, user_id: PydanticObjectId | str) -> User:
        """Delete a user and return the deleted document.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self._get_or_raise(user_id)
        await self.repo.delete(user)
        logger.info("user_deleted", user_id=str(user.id))
        return user

    async def _get_or_raise(self, user_id: PydanticObjectId | str) -> User:
        user = await self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found", resource="user", resource_id=str(user_id))
        return user
