"""Logging module with structured logging and request tracking."""

from authkit.core.logging.config import configure_logging
from authkit.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
]
