"""Authentication service for login, logout and token-backed flows."""

import structlog

from authkit.core.auth.backend import hash_password
from authkit.core.errors import AppException, NotFoundError, UnauthorizedError
from authkit.modules.tokens.schemas import AuthTokens
from authkit.modules.tokens.service import TokenService, get_token_service
from authkit.modules.tokens.types import TokenType
from authkit.modules.users.models import User
from authkit.modules.users.repos import UserRepository
from authkit.modules.users.services import UserService


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations.

    Handles login, logout, refresh token rotation, password reset and
    email verification.
    """

    def __init__(self, token_service: TokenService, user_service: UserService) -> None:
        self.token_service = token_service
        self.user_service = user_service

    async def login_user_with_email_and_password(self, email: str, password: str) -> User:
        """Authenticate a user with email and password.

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        user = await self.user_service.get_user_by_email(email)
        if not user or not user.is_password_match(password):
            logger.warning("login_failed")
            raise UnauthorizedError(
                "Incorrect email or password",
                error_code="invalid_credentials",
            )
        logger.info("login_succeeded", user_id=str(user.id))
        return user

    async def logout(self, refresh_token: str) -> None:
        """Revoke a refresh token by blacklisting its stored record.

        Raises:
            NotFoundError: If no live refresh record matches
        """
        token_repo = self.token_service.token_repo
        doc = await token_repo.find_one(
            token=refresh_token, type=TokenType.REFRESH, blacklisted=False
        )
        if not doc:
            raise NotFoundError("Not found", resource="token")
        await token_repo.blacklist(doc)
        logger.info("logout", user_id=str(doc.user))

    async def refresh_auth(self, refresh_token: str) -> AuthTokens:
        """Exchange a refresh token for a new token pair.

        The presented refresh token is blacklisted, so each one works once.

        Raises:
            UnauthorizedError: If the token or its user is not valid
        """
        try:
            doc = await self.token_service.verify_token(refresh_token, TokenType.REFRESH)
            user = await self.user_service.get_user_by_id(doc.user)
            if not user:
                raise NotFoundError("User not found", resource="user")
        except AppException as e:
            logger.warning("refresh_failed", error_code=e.error_code)
            raise UnauthorizedError("Please authenticate") from e

        await self.token_service.token_repo.blacklist(doc)
        logger.info("refresh_token_rotated", user_id=str(user.id))
        return await self.token_service.generate_auth_tokens(user)

    async def reset_password(self, reset_password_token: str, new_password: str) -> None:
        """Set a new password using a reset-password token.

        All of the user's outstanding reset tokens are deleted afterwards.

        Raises:
            UnauthorizedError: If the token or its user is not valid
        """
        try:
            doc = await self.token_service.verify_token(
                reset_password_token, TokenType.RESET_PASSWORD
            )
            user = await self.user_service.get_user_by_id(doc.user)
            if not user:
                raise NotFoundError("User not found", resource="user")
        except AppException as e:
            logger.warning("password_reset_failed", error_code=e.error_code)
            raise UnauthorizedError("Password reset failed") from e

        user.password = hash_password(new_password)
        await self.user_service.repo.update(user)
        await self.token_service.token_repo.delete_for_user(user.id, TokenType.RESET_PASSWORD)
        logger.info("password_reset", user_id=str(user.id))

    async def verify_email(self, verify_email_token: str) -> User:
        """Mark a user's email as verified using a verify-email token.

        Raises:
            UnauthorizedError: If the token or its user is not valid
        """
        try:
            doc = await self.token_service.verify_token(
                verify_email_token, TokenType.VERIFY_EMAIL
            )
            user = await self.user_service.get_user_by_id(doc.user)
            if not user:
                raise NotFoundError("User not found", resource="user")
        except AppException as e:
            logger.warning("email_verification_failed", error_code=e.error_code)
            raise UnauthorizedError("Email verification failed") from e

        await self.token_service.token_repo.delete_for_user(user.id, TokenType.VERIFY_EMAIL)
        user.is_email_verified = True
        user = await self.user_service.repo.update(user)
        logger.info("email_verified", user_id=str(user.id))
        return user


def get_auth_service() -> AuthService:
    """Build an AuthService wired to the default repositories."""
    return AuthService(
        token_service=get_token_service(),
        user_service=UserService(UserRepository()),
    )
