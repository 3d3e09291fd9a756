"""Special properties added to representations in full HAL mode."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from bson import ObjectId

from .context import ResourceType
from .representation import Representation

ISO_INSTANT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def derive_last_updated_on(data: Mapping[str, Any]) -> Optional[str]:
    """Return the creation instant embedded in an ObjectId ``_etag``.

    Only applies when ``_etag`` is an ObjectId and ``_lastupdated_on`` is
    missing; otherwise returns None.
    """
    etag = data.get("_etag")
    if not isinstance(etag, ObjectId):
        return None
    if data.get("_lastupdated_on") is not None:
        return None
    return etag.generation_time.strftime(ISO_INSTANT_FORMAT)


def add_special_properties(
    rep: Representation, resource_type: ResourceType, data: Optional[Mapping[str, Any]]
) -> None:
    """Set ``_type`` and, when derivable, ``_lastupdated_on`` on ``rep``."""
    rep.add_property("_type", resource_type.name)
    last_updated_on = derive_last_updated_on(data or {})
    if last_updated_on is not None:
        rep.add_property("_lastupdated_on", last_updated_on)
