"""Authentication module for passwords, JWTs and auth flows.

``AuthService`` lives in ``authkit.core.auth.service``; it is not
re-exported here because it depends on the token and user modules.
"""

from authkit.core.auth.backend import (
    decode_payload,
    hash_password,
    sign_payload,
    verify_password,
)


__all__ = [
    "decode_payload",
    "hash_password",
    "sign_payload",
    "verify_password",
]
