"""Error handling module with RFC 7807 Problem Details."""

from authkit.core.errors.exceptions import (
    AppException,
    ConflictError,
    InvalidEntityError,
    InvalidTokenError,
    NotFoundError,
    ServiceUnavailableError,
    TokenNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)
from authkit.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    "AppException",
    "ConflictError",
    "FieldError",
    "InvalidEntityError",
    "InvalidTokenError",
    "NotFoundError",
    "ProblemDetail",
    "ServiceUnavailableError",
    "TokenNotFoundError",
    "UnauthorizedError",
    "UserNotFoundError",
    "register_exception_handlers",
]
