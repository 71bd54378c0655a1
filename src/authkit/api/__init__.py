"""API routers."""

from authkit.api.router import api_router


__all__ = ["api_router"]
