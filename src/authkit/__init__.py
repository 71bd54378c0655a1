"""authkit - FastAPI + MongoDB backend boilerplate."""

__version__ = "0.1.0"
