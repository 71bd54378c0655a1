"""Public views of stored documents.

``to_json`` turns a document (or its raw field mapping) into the mapping
returned to API clients: the internal ``_id`` becomes a string ``id``,
bookkeeping fields are dropped, and callers may hide further fields.

Example:
    >>> to_json({"_id": 1, "name": "a", "password": "x", "__v": 0}, hide="password")
    {'name': 'a', 'id': '1'}
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from authkit.core.constants import ALWAYS_HIDDEN_FIELDS, INTERNAL_ID_FIELD, PUBLIC_ID_FIELD
from authkit.core.errors import InvalidEntityError


def _as_mapping(entity: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(entity, BaseModel):
        return entity.model_dump(mode="json", by_alias=True, exclude={"revision_id"})
    return dict(entity)


def to_json(entity: Mapping[str, Any] | BaseModel, hide: str = "") -> dict[str, Any]:
    """Build the external view of a document.

    Models are dumped in JSON mode, so enums, datetimes and ObjectIds come
    out as plain strings. A mapping that is already a view (``id`` but no
    ``_id``) keeps its ``id``, so applying this twice is safe.

    Args:
        entity: A pydantic/Beanie document or a plain field mapping
        hide: Space-separated field names to omit

    Returns:
        A new dict; the input is left untouched

    Raises:
        InvalidEntityError: If neither ``_id`` nor ``id`` holds a value, as
            for a document that was never inserted
    """
    view = _as_mapping(entity)
    identifier = view.pop(INTERNAL_ID_FIELD, None)
    if identifier is None:
        identifier = view.pop(PUBLIC_ID_FIELD, None)
    if identifier is None:
        raise InvalidEntityError(details={"fields": sorted(view)})

    for field in hide.split():
        view.pop(field, None)
    for field in ALWAYS_HIDDEN_FIELDS:
        view.pop(field, None)

    view[PUBLIC_ID_FIELD] = str(identifier)
    return view
