"""User repository for database operations."""

from typing import Any

from beanie import PydanticObjectId

from authkit.core.database.pagination import QueryOptions, QueryResult, paginate
from authkit.modules.users.models import User, UserRole


class UserRepository:
    """Repository for User database operations."""

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Insert a new user.

        Args:
            name: Display name
            email: Email address
            password_hash: Pre-hashed password
            role: Access role

        Returns:
            The inserted user with ``id`` populated
        """
        user = User(name=name, email=email, password=password_hash, role=role)
        return await user.insert()

    async def get_by_id(self, user_id: PydanticObjectId | str) -> User | None:
        if not PydanticObjectId.is_valid(user_id):
            return None
        return await User.get(PydanticObjectId(user_id))

    async def get_by_email(self, email: str) -> User | None:
        return await User.find_one({"email": email.strip().lower()})

    async def is_email_taken(
        self, email: str, exclude_user_id: PydanticObjectId | None = None
    ) -> bool:
        """Check whether another user already uses this email.

        Args:
            email: Email to check
            exclude_user_id: A user to ignore, e.g. the one being updated
        """
        query: dict[str, Any] = {"email": email.strip().lower()}
        if exclude_user_id is not None:
            query["_id"] = {"$ne": exclude_user_id}
        return await User.find_one(query) is not None

    async def query(self, filter: dict[str, Any], options: QueryOptions) -> QueryResult[User]:
        return await paginate(User, filter, options)

    async def update(self, user: User) -> User:
        await user.save()
        return user

    async def delete(self, user: User) -> None:
        await user.delete()
