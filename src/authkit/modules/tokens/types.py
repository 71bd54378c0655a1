"""Token type tags."""

from enum import Enum
from typing import assert_never


class TokenType(str, Enum):
    """Purpose a token was issued for; embedded in the JWT ``type`` claim."""

    ACCESS = "access"
    REFRESH = "refresh"
    RESET_PASSWORD = "resetPassword"
    VERIFY_EMAIL = "verifyEmail"

    @property
    def is_persisted(self) -> bool:
        """Whether issued tokens of this type are stored (and so revocable)."""
        match self:
            case TokenType.ACCESS:
                return False
            case TokenType.REFRESH | TokenType.RESET_PASSWORD | TokenType.VERIFY_EMAIL:
                return True
            case _:
                assert_never(self)
