"""Token schemas."""

from datetime import datetime

from pydantic import BaseModel

from authkit.modules.tokens.types import TokenType


class TokenPayload(BaseModel):
    """Claims carried inside a signed token.

    Attributes:
        sub: Id of the user the token was issued to
        iat: Issued-at, unix seconds
        exp: Expiry, unix seconds
        type: Token type tag
    """

    sub: str
    iat: int
    exp: int
    type: TokenType


class AuthToken(BaseModel):
    """A signed token and the moment it expires."""

    token: str
    expires: datetime


class AuthTokens(BaseModel):
    """Access/refresh pair returned on login, registration and refresh."""

    access: AuthToken
    refresh: AuthToken
