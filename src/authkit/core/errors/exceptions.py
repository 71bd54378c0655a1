"""Domain exceptions for the application.

These exceptions represent business-logic errors and are converted to
RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("User not found", resource="user", resource_id=str(user_id))
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when there's a conflict with existing data.

    Example:
        raise ConflictError("Email already taken", details={"email": email})
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid."""

    message = "Please authenticate"
    error_code = "unauthorized"
    status_code = 401


class InvalidTokenError(UnauthorizedError):
    """Raised when a token's signature, expiry claim, or subject is invalid."""

    message = "Invalid token"
    error_code = "invalid_token"


class TokenNotFoundError(UnauthorizedError):
    """Raised when no non-blacklisted stored record matches a presented token."""

    message = "Token not found"
    error_code = "token_not_found"


class UserNotFoundError(NotFoundError):
    """Raised when a user lookup by email or id misses."""

    message = "User not found"
    error_code = "user_not_found"


class InvalidEntityError(AppException):
    """Raised when a document without an identifier is serialized."""

    message = "Entity has no identifier"
    error_code = "invalid_entity"
    status_code = 500


class ServiceUnavailableError(AppException):
    """Raised when a required service is unavailable.

    Example:
        raise ServiceUnavailableError("Database connection failed")
    """

    message = "Service temporarily unavailable"
    error_code = "service_unavailable"
    status_code = 503
