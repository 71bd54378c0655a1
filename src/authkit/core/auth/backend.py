"""Authentication primitives for passwords and JWTs.

This module provides:
- Password hashing with bcrypt
- JWT signing and verification
"""

from typing import Any

from jose import jwt
from passlib.context import CryptContext

from authkit.core.constants import BCRYPT_ROUNDS


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# JWT Utilities
# ============================================================


def sign_payload(payload: dict[str, Any], secret: str, algorithm: str) -> str:
    """Encode and sign a JWT.

    Args:
        payload: Claims to embed
        secret: Signing secret
        algorithm: JWS algorithm, e.g. ``HS256``

    Returns:
        The compact JWT string
    """
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_payload(token: str, secret: str, algorithm: str) -> dict[str, Any]:
    """Verify a JWT's signature and ``exp`` claim and return its claims.

    Raises:
        jose.JWTError: If the signature is invalid or the token has expired
    """
    return jwt.decode(token, secret, algorithms=[algorithm])
