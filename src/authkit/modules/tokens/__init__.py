"""Token lifecycle module: issuance, storage and verification of JWTs."""

from authkit.modules.tokens.config import JWTConfig
from authkit.modules.tokens.models import Token
from authkit.modules.tokens.repos import TokenRepository
from authkit.modules.tokens.schemas import AuthToken, AuthTokens, TokenPayload
from authkit.modules.tokens.service import TokenService, get_token_service
from authkit.modules.tokens.types import TokenType


__all__ = [
    "AuthToken",
    "AuthTokens",
    "JWTConfig",
    "Token",
    "TokenPayload",
    "TokenRepository",
    "TokenService",
    "TokenType",
    "get_token_service",
]
