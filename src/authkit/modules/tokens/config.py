"""Token lifetimes and signing configuration."""

from datetime import timedelta
from typing import assert_never

from pydantic import BaseModel, ConfigDict, Field

from authkit.config import Settings
from authkit.modules.tokens.types import TokenType


class JWTConfig(BaseModel):
    """Signing secret, algorithm and per-type lifetimes for ``TokenService``."""

    model_config = ConfigDict(frozen=True)

    secret: str
    algorithm: str = "HS256"
    access_expiration_minutes: int = Field(default=30, ge=1)
    refresh_expiration_days: int = Field(default=30, ge=1)
    reset_password_expiration_minutes: int = Field(default=10, ge=1)
    verify_email_expiration_minutes: int = Field(default=10, ge=1)

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTConfig":
        return cls(
            secret=settings.secret_key,
            algorithm=settings.jwt_algorithm,
            access_expiration_minutes=settings.jwt_access_expiration_minutes,
            refresh_expiration_days=settings.jwt_refresh_expiration_days,
            reset_password_expiration_minutes=settings.jwt_reset_password_expiration_minutes,
            verify_email_expiration_minutes=settings.jwt_verify_email_expiration_minutes,
        )

    def lifetime(self, token_type: TokenType) -> timedelta:
        """How long a token of ``token_type`` stays valid after issuance."""
        match token_type:
            case TokenType.ACCESS:
                return timedelta(minutes=self.access_expiration_minutes)
            case TokenType.REFRESH:
                return timedelta(days=self.refresh_expiration_days)
            case TokenType.RESET_PASSWORD:
                return timedelta(minutes=self.reset_password_expiration_minutes)
            case TokenType.VERIFY_EMAIL:
                return timedelta(minutes=self.verify_email_expiration_minutes)
            case _:
                assert_never(token_type)
