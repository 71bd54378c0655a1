"""Beanie document base class and common fields."""

from datetime import datetime
from typing import Any

from beanie import Document, Insert, Replace, Save, SaveChanges, Update, before_event
from pydantic import Field

from authkit.core.serialization import to_json
from authkit.core.utils.clock import utc_now


class TimestampedDocument(Document):
    """Base class for all stored documents.

    Adds ``createdAt``/``updatedAt`` timestamps and a ``__v`` version
    counter, stored under those keys, and a ``to_json`` view that hides
    them again.

    Example:
        class Project(TimestampedDocument):
            name: str

            class Settings:
                name = "projects"
    """

    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=utc_now, alias="updatedAt")
    version: int = Field(default=0, alias="__v")

    @before_event(Insert)
    def stamp_created(self) -> None:
        now = utc_now()
        self.created_at = now
        self.updated_at = now

    @before_event(Replace, Save, SaveChanges, Update)
    def stamp_updated(self) -> None:
        self.updated_at = utc_now()

    def to_json(self, hide: str = "") -> dict[str, Any]:
        """Return the public view of this document, see ``authkit.core.serialization``."""
        return to_json(self, hide=hide)
