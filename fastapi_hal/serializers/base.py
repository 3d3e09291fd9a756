"""Render HAL representations to JSON."""

from __future__ import annotations

import json
from typing import Any

from bson import json_util
from bson.json_util import JSONOptions, RELAXED_JSON_OPTIONS

from fastapi_hal.core.representation import Representation

HAL_MEDIA_TYPE = "application/hal+json"


class HALSerializer:
    """Serialize representations holding BSON values into HAL JSON."""

    media_type: str = HAL_MEDIA_TYPE
    json_options: JSONOptions = RELAXED_JSON_OPTIONS

    def to_json_compatible(self, rep: Representation) -> dict[str, Any]:
        """Return ``rep`` as plain JSON types (ObjectIds become ``{"$oid": ...}``)."""
        return json.loads(self.dumps(rep))

    def dumps(self, rep: Representation) -> str:
        return json_util.dumps(rep.to_dict(), json_options=self.json_options)

    def render(self, rep: Representation) -> bytes:
        """Return the UTF-8 encoded HAL document."""
        return self.dumps(rep).encode("utf-8")
