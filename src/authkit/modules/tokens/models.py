"""Token document model."""

from datetime import datetime

from beanie import Indexed, PydanticObjectId
from pymongo import ASCENDING, IndexModel

from authkit.core.database.base import TimestampedDocument
from authkit.modules.tokens.types import TokenType


class Token(TimestampedDocument):
    """A stored refresh, reset-password or verify-email token.

    Access tokens are never stored. Records past ``expires`` are removed
    by MongoDB through the TTL index.

    Attributes:
        token: The raw signed JWT
        user: Id of the owning user
        type: What the token may be used for
        expires: Expiry, mirrors the JWT ``exp`` claim
        blacklisted: Revoked tokens fail verification regardless of expiry
    """

    token: Indexed(str)  # type: ignore[valid-type]
    user: Indexed(PydanticObjectId)  # type: ignore[valid-type]
    type: TokenType
    expires: datetime
    blacklisted: bool = False

    class Settings:
        name = "tokens"
        indexes = [
            IndexModel([("expires", ASCENDING)], expireAfterSeconds=0),
        ]

    def __repr__(self) -> str:
        return (
            f"<Token(id={self.id}, user={self.user}, type={self.type.value}, "
            f"blacklisted={self.blacklisted})>"
        )
