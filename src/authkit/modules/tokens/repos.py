"""Token repository for database operations."""

from datetime import datetime
from typing import Any

from beanie import PydanticObjectId

from authkit.modules.tokens.models import Token
from authkit.modules.tokens.types import TokenType


class TokenRepository:
    """Repository for stored Token records."""

    async def create(
        self,
        token: str,
        user_id: PydanticObjectId,
        expires: datetime,
        type: TokenType,
        blacklisted: bool = False,
    ) -> Token:
        """Insert a token record.

        Returns:
            The inserted token with ``id`` populated
        """
        doc = Token(
            token=token,
            user=user_id,
            expires=expires,
            type=type,
            blacklisted=blacklisted,
        )
        return await doc.insert()

    async def find_one(
        self,
        token: str,
        type: TokenType,
        user_id: PydanticObjectId | None = None,
        blacklisted: bool = False,
    ) -> Token | None:
        """Find a record by exact match on token string, type and flags.

        Args:
            token: The raw token string
            type: Token type tag
            user_id: Owning user, if the match should be scoped to one
            blacklisted: Match revoked (True) or live (False) records
        """
        query: dict[str, Any] = {"token": token, "type": type.value, "blacklisted": blacklisted}
        if user_id is not None:
            query["user"] = user_id
        return await Token.find_one(query)

    async def blacklist(self, doc: Token) -> Token:
        doc.blacklisted = True
        await doc.save()
        return doc

    async def delete_for_user(self, user_id: PydanticObjectId, type: TokenType) -> int:
        """Delete every record of ``type`` owned by ``user_id``.

        Returns:
            Number of records deleted
        """
        result = await Token.find({"user": user_id, "type": type.value}).delete()
        return result.deleted_count if result else 0
