"""URL helpers for resource paths and links."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable
from urllib.parse import urlencode

from bson import MaxKey, MinKey, ObjectId

from fastapi_hal.core.errors import UnsupportedIdentifierError


def remove_trailing_slashes(path: str) -> str:
    stripped = path.rstrip("/")
    return stripped or "/"


def get_parent_path(path: str) -> str:
    """Return the parent of ``path`` (``/db/coll`` -> ``/db``)."""
    path = remove_trailing_slashes(path)
    if path == "/":
        return path
    parent = path.rsplit("/", 1)[0]
    return parent or "/"


def document_id_reference(doc_id: Any) -> str:
    """Render a document id as a path segment, with an ``id_type`` hint if needed.

    ObjectIds and plain strings need no hint; a string that looks like an
    ObjectId is marked ``STRING`` so it is not read back as one.
    """
    if isinstance(doc_id, ObjectId):
        return str(doc_id)
    if isinstance(doc_id, str):
        if ObjectId.is_valid(doc_id):
            return f"{doc_id}?id_type=STRING"
        return doc_id
    if isinstance(doc_id, bool):
        raise UnsupportedIdentifierError(f"Boolean id '{doc_id}' is not supported.")
    if isinstance(doc_id, (int, float)):
        return f"{doc_id}?id_type=NUMBER"
    if isinstance(doc_id, datetime):
        if doc_id.tzinfo is None:
            doc_id = doc_id.replace(tzinfo=timezone.utc)
        millis = int(doc_id.timestamp() * 1000)
        return f"{millis}?id_type=DATE"
    if isinstance(doc_id, MinKey):
        return "_MinKey?id_type=MINKEY"
    if isinstance(doc_id, MaxKey):
        return "_MaxKey?id_type=MAXKEY"
    raise UnsupportedIdentifierError(
        f"Id of type {type(doc_id).__name__} cannot be used in a resource path."
    )


def replace_query_param(
    pairs: Iterable[tuple[str, str]], key: str, value: Any
) -> list[tuple[str, str]]:
    """Return ``pairs`` with every ``key`` replaced by a single ``value``.

    The replacement takes the position of the first occurrence; it is
    appended when ``key`` is absent.
    """
    replaced: list[tuple[str, str]] = []
    found = False
    for name, current in pairs:
        if name != key:
            replaced.append((name, current))
        elif not found:
            replaced.append((key, str(value)))
            found = True
    if not found:
        replaced.append((key, str(value)))
    return replaced


def build_url(path: str, pairs: Iterable[tuple[str, str]]) -> str:
    query = urlencode(list(pairs))
    return f"{path}?{query}" if query else path
