"""HAL serializers."""

from .base import HAL_MEDIA_TYPE, HALSerializer

__all__ = ["HAL_MEDIA_TYPE", "HALSerializer"]
