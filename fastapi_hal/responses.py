"""Starlette response carrying a HAL document."""

from typing import Any

from starlette.responses import Response

from fastapi_hal.core.representation import Representation
from fastapi_hal.serializers.base import HAL_MEDIA_TYPE, HALSerializer


class HALResponse(Response):
    """Response rendering a ``Representation`` as ``application/hal+json``."""

    media_type = HAL_MEDIA_TYPE
    serializer = HALSerializer()

    def render(self, content: Any) -> bytes:
        if isinstance(content, Representation):
            return self.serializer.render(content)
        return super().render(content)
