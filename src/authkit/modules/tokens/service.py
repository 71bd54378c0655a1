"""Token issuance, persistence and verification."""

from collections.abc import Callable
from datetime import datetime

import structlog
from beanie import PydanticObjectId
from jose import JWTError
from pydantic import ValidationError

from authkit.config import settings
from authkit.core.auth.backend import decode_payload, sign_payload
from authkit.core.errors import InvalidTokenError, TokenNotFoundError, UserNotFoundError
from authkit.core.utils.clock import utc_now
from authkit.modules.tokens.config import JWTConfig
from authkit.modules.tokens.models import Token
from authkit.modules.tokens.repos import TokenRepository
from authkit.modules.tokens.schemas import AuthToken, AuthTokens, TokenPayload
from authkit.modules.tokens.types import TokenType
from authkit.modules.users.models import User
from authkit.modules.users.repos import UserRepository


logger = structlog.get_logger()


class TokenService:
    """Issues, stores and verifies typed, expiring JWTs.

    Signing is stateless. Every type except ACCESS is also stored, so it
    can be looked up on verification and revoked by blacklisting.

    Args:
        config: Signing secret and lifetimes
        token_repo: Store for token records
        user_repo: Store used to resolve users by email
        clock: Source of the current time
    """

    def __init__(
        self,
        config: JWTConfig,
        token_repo: TokenRepository,
        user_repo: UserRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config = config
        self.token_repo = token_repo
        self.user_repo = user_repo
        self.clock = clock

    def generate_token(
        self,
        user_id: PydanticObjectId | str,
        expires: datetime,
        type: TokenType,
        secret: str | None = None,
    ) -> str:
        """Sign a token for a user.

        Args:
            user_id: Subject of the token
            expires: Expiry written to the ``exp`` claim
            type: Token type written to the ``type`` claim
            secret: Signing secret, defaults to the configured one

        Returns:
            The signed JWT
        """
        payload = TokenPayload(
            sub=str(user_id),
            iat=int(self.clock().timestamp()),
            exp=int(expires.timestamp()),
            type=type,
        )
        return sign_payload(
            payload.model_dump(mode="json"),
            secret or self.config.secret,
            self.config.algorithm,
        )

    async def save_token(
        self,
        token: str,
        user_id: PydanticObjectId,
        expires: datetime,
        type: TokenType,
        blacklisted: bool = False,
    ) -> Token:
        """Store a token record. Store failures propagate.

        Raises:
            ValueError: If ``type`` is never stored (access tokens)
        """
        if not type.is_persisted:
            raise ValueError(f"{type.value} tokens are not stored")
        doc = await self.token_repo.create(
            token=token,
            user_id=user_id,
            expires=expires,
            type=type,
            blacklisted=blacklisted,
        )
        logger.info("token_saved", user_id=str(user_id), type=type.value)
        return doc

    async def verify_token(self, token: str, type: TokenType) -> Token:
        """Resolve a token string to its live stored record.

        Raises:
            InvalidTokenError: If the signature or expiry claim fails, or the
                subject is not a valid user id
            TokenNotFoundError: If no non-blacklisted record of ``type``
                matches the token and its subject
        """
        payload = self._decode(token)

        sub = payload.get("sub")
        if not isinstance(sub, str) or not PydanticObjectId.is_valid(sub):
            logger.warning("token_subject_invalid", type=type.value)
            raise InvalidTokenError("Token subject is not a valid user id")

        doc = await self.token_repo.find_one(
            token=token,
            type=type,
            user_id=PydanticObjectId(sub),
            blacklisted=False,
        )
        if doc is None:
            logger.warning("token_not_found", user_id=sub, type=type.value)
            raise TokenNotFoundError()
        return doc

    def verify_access_token(self, token: str) -> TokenPayload:
        """Check an access token by signature and claims alone.

        Raises:
            InvalidTokenError: If the token is invalid, expired, malformed,
                or not an access token
        """
        try:
            payload = TokenPayload.model_validate(self._decode(token))
        except ValidationError as e:
            raise InvalidTokenError("Malformed token claims") from e

        if not PydanticObjectId.is_valid(payload.sub):
            raise InvalidTokenError("Token subject is not a valid user id")
        if payload.type is not TokenType.ACCESS:
            raise InvalidTokenError("Not an access token")
        return payload

    async def generate_auth_tokens(self, user: User) -> AuthTokens:
        """Issue an access/refresh pair; only the refresh token is stored."""
        now = self.clock()

        access_expires = now + self.config.lifetime(TokenType.ACCESS)
        access_token = self.generate_token(user.id, access_expires, TokenType.ACCESS)

        refresh_expires = now + self.config.lifetime(TokenType.REFRESH)
        refresh_token = self.generate_token(user.id, refresh_expires, TokenType.REFRESH)
        await self.save_token(refresh_token, user.id, refresh_expires, TokenType.REFRESH)

        return AuthTokens(
            access=AuthToken(token=access_token, expires=access_expires),
            refresh=AuthToken(token=refresh_token, expires=refresh_expires),
        )

    async def generate_reset_password_token(self, email: str) -> str:
        """Issue and store a reset-password token for the user with ``email``.

        Raises:
            UserNotFoundError: If no user has that email
        """
        user = await self.user_repo.get_by_email(email)
        if not user:
            raise UserNotFoundError("No users found with this email")
        return await self._issue_stored(user, TokenType.RESET_PASSWORD)

    async def generate_verify_email_token(self, user: User) -> str:
        """Issue and store a verify-email token for ``user``."""
        return await self._issue_stored(user, TokenType.VERIFY_EMAIL)

    async def _issue_stored(self, user: User, type: TokenType) -> str:
        expires = self.clock() + self.config.lifetime(type)
        token = self.generate_token(user.id, expires, type)
        await self.save_token(token, user.id, expires, type)
        return token

    def _decode(self, token: str) -> dict:
        try:
            return decode_payload(token, self.config.secret, self.config.algorithm)
        except JWTError as e:
            logger.warning("token_decode_failed", error=str(e))
            raise InvalidTokenError() from e


def get_token_service() -> TokenService:
    """Build a TokenService from global settings."""
    return TokenService(
        config=JWTConfig.from_settings(settings),
        token_repo=TokenRepository(),
        user_repo=UserRepository(),
    )

